"""
校验状态，记录部分更新过程中的错误
"""
from typing import Dict, List


class ValidationState:
    """按字段收集错误信息"""

    def __init__(self):
        self._errors: Dict[str, List[str]] = {}

    def add_error(self, key: str, message: str) -> None:
        self._errors.setdefault(key, []).append(message)

    @property
    def is_valid(self) -> bool:
        return not self._errors

    @property
    def errors(self) -> Dict[str, List[str]]:
        return {key: list(messages) for key, messages in self._errors.items()}

    def __repr__(self):
        return f"ValidationState(errors={self._errors})"

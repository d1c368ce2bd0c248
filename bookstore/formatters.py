"""
text/vcard 请求体解析
"""
from typing import Dict, List

from bookstore.exceptions import VCardFormatError

VCARD_CONTENT_TYPE = "text/vcard"

# vCard属性 -> Book字段
VCARD_FIELDS = {
    "FN": "name",
    "X-AUTHOR": "author",
    "X-ISBN": "isbn",
    "ORG": "publisher",
    "NOTE": "description",
}


def _unfold(text: str) -> List[str]:
    """合并折行（以空格或制表符开头的续行）"""
    lines: List[str] = []
    for raw in text.replace("\r\n", "\n").replace("\r", "\n").split("\n"):
        if raw[:1] in (" ", "\t") and lines:
            lines[-1] += raw[1:]
        elif raw.strip():
            lines.append(raw)
    return lines


def _unescape(value: str) -> str:
    result = []
    chars = iter(value)
    for ch in chars:
        if ch == "\\":
            nxt = next(chars, "")
            result.append("\n" if nxt in ("n", "N") else nxt)
        else:
            result.append(ch)
    return "".join(result)


def parse_vcard(text: str) -> Dict[str, str]:
    """解析单个vCard为书籍字段字典"""
    lines = _unfold(text)
    if not lines or lines[0].strip().upper() != "BEGIN:VCARD":
        raise VCardFormatError("vCard must start with BEGIN:VCARD")
    if lines[-1].strip().upper() != "END:VCARD":
        raise VCardFormatError("vCard must end with END:VCARD")

    data: Dict[str, str] = {}
    for line in lines[1:-1]:
        name, sep, value = line.partition(":")
        if not sep:
            raise VCardFormatError(f"Malformed vCard line: {line!r}")
        # 忽略参数，例如 FN;CHARSET=UTF-8
        prop = name.split(";", 1)[0].split(".")[-1].strip().upper()
        field = VCARD_FIELDS.get(prop)
        if field:
            if prop == "ORG":
                # ORG 只取组织名
                value = value.split(";", 1)[0]
            data[field] = _unescape(value.strip())
    return data

"""
业务异常定义
"""

class BookStoreException(Exception):
    """基础异常类"""
    pass

class InvalidPatchError(BookStoreException):
    """补丁文档无法应用"""

    def __init__(self, message: str, path: str = ""):
        super().__init__(message)
        self.path = path

class VCardFormatError(BookStoreException):
    """vCard格式错误"""
    pass

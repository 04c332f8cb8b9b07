"""
Binairo 引擎的错误类型

所有错误都可以在边界处恢复：服务器把它们转换成 400/422 响应，CLI 打印后以状态码 1 退出。
"无解" 与 "未填满" 不是异常：前者表现为 solve 之后仍有空格，后者是 ValidationOutcome.INCOMPLETE。
"""


class BinairoError(Exception):
    """引擎错误基类"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidSize(BinairoError):
    """网格尺寸非数字、不为正数、超过上限，或数据形状不是 size×size"""


class InvalidCellValue(BinairoError):
    """单元格内容无法解析为 0/1"""


class InvalidCoordinate(BinairoError):
    """行列坐标超出 [0, size)"""


class SearchBudgetExceeded(BinairoError):
    """回溯搜索超过了允许的检查步数"""

    def __init__(self, message: str, steps: int):
        super().__init__(message)
        self.steps = steps

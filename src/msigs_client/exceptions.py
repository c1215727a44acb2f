"""msigs_client ライブラリの例外型定義"""

from __future__ import annotations


class MsigsClientError(Exception):
    """msigs_client ライブラリのエラー基底クラス。"""

    def __init__(
        self,
        code: str,
        message: str,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return f"{self.code}: {super().__str__()}"


class MsigsClientErrorCodes:
    """MsigsClientError のエラーコード定数。"""

    LIMIT_EXCEEDED: str = "LIMIT_EXCEEDED"
    INVALID_NAME: str = "INVALID_NAME"
    INVALID_INTEGER: str = "INVALID_INTEGER"
    HTTP_ERROR: str = "HTTP_ERROR"
    NOT_FOUND: str = "NOT_FOUND"
    DECODE_ERROR: str = "DECODE_ERROR"
    READ_FILE: str = "READ_FILE_ERROR"
    PARSE_YAML: str = "PARSE_YAML_ERROR"
    VALIDATION: str = "VALIDATION_ERROR"


class LimitExceededError(MsigsClientError):
    """要求された limit がサーバー上限を超えた場合のエラー。"""

    def __init__(self, limit: int, max_limit: int) -> None:
        self.limit = limit
        self.max_limit = max_limit
        super().__init__(
            code=MsigsClientErrorCodes.LIMIT_EXCEEDED,
            message=f"Limit cannot exceed {max_limit}",
        )

# core/errors.py
# Failures surfaced to the user.  Parsing and serialising never fail; only the file and
# OS operations around them do, and each carries the underlying cause as __cause__.


class StyleEditorError(Exception):
    """Base class for every error the editor reports to the user."""

    prefix = "エラー"

    def __init__(self, cause: BaseException):
        super().__init__(f"{self.prefix}: {cause}")
        self.cause = cause


class StyleReadError(StyleEditorError):
    prefix = "ファイルの読み込みに失敗しました"


class StyleWriteError(StyleEditorError):
    prefix = "ファイルの保存に失敗しました"


class RevealError(StyleEditorError):
    prefix = "ファイルを開けませんでした"



class FuncLangError(Exception):
    """ Base class for all FuncLang errors"""
    pass

class FuncLangSyntaxError(FuncLangError):
    """ Raised when program text is malformed"""

    def __init__(self, message: str, position: int | None = None):
        super().__init__(message)
        self.position = position

class FuncLangUnboundSymbol(FuncLangError):
    """ Raised when a name is looked up before it is bound"""
    pass

class FuncLangTypeError(FuncLangError):
    """ Raised when an abstract value spec names an unknown token"""

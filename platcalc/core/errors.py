# platcalc/core/errors.py


class CalculationError(ValueError):
    """Erro base: a mensagem é exibida diretamente ao usuário."""


class InvalidInput(CalculationError):
    pass


class UnsupportedGeometry(CalculationError):
    pass


class DegenerateCone(CalculationError):
    pass


class InvalidGeometry(CalculationError):
    pass


class ExportError(CalculationError):
    pass

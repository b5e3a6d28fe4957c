class UnitManager:
    """Gerencia conversões para as unidades base dos solvers (mm e graus)."""

    CONVERTERS = {
        'length_to_mm': {
            'mm': 1.0, 'cm': 10.0, 'm': 1000.0, 'in': 25.4, 'ft': 304.8
        },
        'angle_to_deg': {
            'deg': 1.0, 'rad': 57.29577951308232
        }
    }

    @staticmethod
    def units_for(category: str) -> list:
        return list(UnitManager.CONVERTERS[category])

    @staticmethod
    def convert(value: float, from_unit: str, category: str, reverse: bool = False) -> float:
        """
        category: 'length_to_mm' ou 'angle_to_deg'.
        reverse: Se True, converte DA base PARA a unidade de exibição.
        """
        factors = UnitManager.CONVERTERS.get(category)
        if factors is None:
            raise KeyError(f"Unknown unit category: {category}")
        if from_unit not in factors:
            raise KeyError(f"Unknown unit '{from_unit}' for {category}")

        factor = factors[from_unit]
        if reverse:
            return value / factor
        return value * factor

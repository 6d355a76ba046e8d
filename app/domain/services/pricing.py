from datetime import date


def count_nights(check_in: date, check_out: date) -> int:
    """
    Número de noches de una estancia.

    Rangos vacíos o invertidos cuentan como 1 noche (mínimo), nunca error.
    """
    nights = (check_out - check_in).days
    return max(1, nights)


def calculate_stay_price(price_per_night: int, check_in: date, check_out: date) -> int:
    """
    Precio total de la estancia (aritmética entera, sin redondeos).

    Es la única fórmula de precio del sistema: la usan el carrito, la pantalla
    de resumen y el fichero de confirmación.

    Args:
        price_per_night: Tarifa por noche
        check_in: Fecha de entrada
        check_out: Fecha de salida

    Returns:
        price_per_night * noches
    """
    return price_per_night * count_nights(check_in, check_out)

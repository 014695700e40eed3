"""Текстовый отчёт о восстановлении секрета."""


def format_report(title: str, k: int, secret: int) -> str:
    """
    Отчёт об успешном восстановлении.

    Returns:
        Многострочный текст без завершающего перевода строки
    """
    lines = [
        f"--- Processing: {title} ---",
        f"Polynomial degree m = k-1 = {k - 1}",
        f"Using {k} points for interpolation.",
        "",
        "--- RESULT ---",
        f"The constant term 'c' is: {secret}",
        "--------------",
    ]
    return "\n".join(lines)


def format_insufficient(k: int, available: int) -> str:
    return f"Error: Interpolation requires {k} points, but only {available} were provided."

"""Official line colours, keyed by line short name."""

DEFAULT_LINE_COLOR = "#808080"

LINE_COLORS: dict[str, str] = {
    # Metro
    "1": "#FFCE00",
    "2": "#0064B0",
    "3": "#9F9825",
    "3bis": "#98D4E2",
    "4": "#C04191",
    "5": "#F28E42",
    "6": "#83C491",
    "7": "#F3A4BA",
    "7bis": "#83C491",
    "8": "#CEADD2",
    "9": "#D5C900",
    "10": "#E3B32A",
    "11": "#8D5E2A",
    "12": "#00814F",
    "13": "#98D4E2",
    "14": "#662483",
    # RER
    "A": "#E3051C",
    "B": "#5291CE",
    "C": "#FFCE00",
    "D": "#00814F",
    "E": "#BD76A1",
    # Tramway
    "T1": "#0064B0",
    "T2": "#C04191",
    "T3a": "#F28E42",
    "T3b": "#00814F",
    "T4": "#F28E42",
    "T5": "#6E6E00",
    "T6": "#E3051C",
    "T7": "#8D5E2A",
    "T8": "#837902",
    "T9": "#5291CE",
    "T10": "#E3B32A",
    "T11": "#F28E42",
    "T12": "#00814F",
    "T13": "#CEADD2",
    # Transilien
    "H": "#8D5E2A",
    "J": "#D5C900",
    "K": "#9F9825",
    "L": "#CEADD2",
    "N": "#00814F",
    "P": "#F28E42",
    "R": "#F3A4BA",
    "U": "#E3051C",
}


def get_line_color(short_name: str) -> str:
    """Colour for a line short name ("1", "A", "T3a"), gray when unknown."""
    return LINE_COLORS.get(short_name, DEFAULT_LINE_COLOR)

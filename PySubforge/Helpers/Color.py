import regex

_HEX_COLOUR = regex.compile(r'^#?(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$')

class Color:
    """
    RGBA colour, as picked in a web form (#rgb, #rrggbb or #rrggbbaa) and
    rendered for a SubStation style override (&HAABBGGRR, alpha 00 = opaque).
    """

    def __init__(self, r : int, g : int, b : int, a : int = 0):
        self.r, self.g, self.b, self.a = (max(0, min(255, channel)) for channel in (r, g, b, a))

    def __eq__(self, value: object) -> bool:
        return isinstance(value, Color) and self.channels == value.channels

    def __repr__(self) -> str:
        return f"Color(r={self.r}, g={self.g}, b={self.b}, a={self.a})"

    @property
    def channels(self) -> tuple[int, int, int, int]:
        return (self.r, self.g, self.b, self.a)

    @classmethod
    def from_hex(cls, hex_str : str) -> 'Color':
        if not _HEX_COLOUR.match(hex_str.strip()):
            raise ValueError(f"Invalid hex color format: {hex_str}")

        digits = hex_str.strip().lstrip('#')
        if len(digits) == 3:
            digits = ''.join(digit * 2 for digit in digits)

        values = [ int(digits[i:i + 2], 16) for i in range(0, len(digits), 2) ]
        return cls(*values)

    def to_hex(self) -> str:
        """ #RRGGBBAA """
        return "#" + "".join(f"{channel:02X}" for channel in self.channels)

    def to_ass(self, alpha : int|None = None) -> str:
        """
        SubStation colour notation, with an optional alpha override
        """
        a = self.a if alpha is None else max(0, min(255, alpha))
        return f"&H{a:02X}{self.b:02X}{self.g:02X}{self.r:02X}"

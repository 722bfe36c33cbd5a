"""
Vertical ASCII bar charts for the report
"""

DEFAULT_HEIGHT = 10
BAR = '#'
EMPTY = ' '


def _label(value):
    if isinstance(value, int):
        return str(value)
    return f"{value:.2f}"


class Chart:
    """Renders one column per value, scaled so the largest value fills the height"""

    def __init__(self, height=DEFAULT_HEIGHT):
        if height < 1:
            raise ValueError(f"Chart height must be at least 1, got {height}")
        self.height = height

    def scale(self, values):
        """ Bar height for each value, in rows """
        top = max(values)
        if top <= 0:
            return [0 for _ in values]
        return [int(round(v * self.height / top)) for v in values]

    def make(self, values):
        values = list(values)
        if not values:
            return ''

        heights = self.scale(values)
        top_label = _label(max(values))
        width = max(len(top_label), 1)

        lines = []
        for row in range(self.height, 0, -1):
            if row == self.height:
                axis = top_label.rjust(width)
            elif row == 1:
                axis = '0'.rjust(width)
            else:
                axis = ' ' * width
            bars = ''.join(BAR if h >= row else EMPTY for h in heights)
            lines.append(f"{axis} |{bars}".rstrip())
        lines.append(' ' * width + ' +' + '-' * len(values))
        return '\n'.join(lines)

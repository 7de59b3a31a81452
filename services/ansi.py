"""ANSI escape codes to HTML spans, for stream and traceback outputs."""
import html
import re
from typing import Iterator, Optional

ANSI_COLORS = {
    '30': '#000', '31': '#c00', '32': '#0a0', '33': '#a50',
    '34': '#00a', '35': '#a0a', '36': '#0aa', '37': '#aaa',
    '90': '#555', '91': '#f55', '92': '#5f5', '93': '#ff5',
    '94': '#55f', '95': '#f5f', '96': '#5ff', '97': '#fff',
}
ANSI_BG_COLORS = {
    '40': '#000', '41': '#c00', '42': '#0a0', '43': '#a50',
    '44': '#00a', '45': '#a0a', '46': '#0aa', '47': '#aaa',
}

# Levels of the 6x6x6 cube in the xterm 256-colour palette
CUBE_LEVELS = (0, 95, 135, 175, 215, 255)

ANSI_PATTERN = re.compile(r'(\x1b\[[0-9;]*m)')
ANSI_CODES = re.compile(r'\x1b\[([0-9;]*)m')


def xterm_color(n: int) -> Optional[str]:
    """CSS colour for an xterm 256-palette index, or None if out of range."""
    if 0 <= n < 8:
        return ANSI_COLORS[str(30 + n)]
    if 8 <= n < 16:
        return ANSI_COLORS[str(82 + n)]
    if 16 <= n < 232:
        n -= 16
        r, g, b = (CUBE_LEVELS[n // 36], CUBE_LEVELS[n // 6 % 6], CUBE_LEVELS[n % 6])
        return f'#{r:02x}{g:02x}{b:02x}'
    if 232 <= n < 256:
        gray = 8 + 10 * (n - 232)
        return f'#{gray:02x}{gray:02x}{gray:02x}'
    return None


def _extended_color(params: Iterator[str]) -> Optional[str]:
    """Consume the tail of a 38/48 code: ``5;n`` or ``2;r;g;b``."""
    try:
        mode = next(params)
        if mode == '5':
            return xterm_color(int(next(params)))
        if mode == '2':
            rgb = [int(next(params)), int(next(params)), int(next(params))]
            if all(0 <= c < 256 for c in rgb):
                return 'rgb({},{},{})'.format(*rgb)
    except (StopIteration, ValueError):
        pass
    return None


def ansi_to_html(text: str) -> str:
    """
    Convert ANSI escape codes to HTML spans with inline styles.

    Handles colors (30-37, 90-97), backgrounds (40-47), 256-colour and
    truecolor foregrounds/backgrounds (38;5;n, 38;2;r;g;b and the 48
    forms), bold (1), and reset (0). Other codes are dropped. Text between
    codes is HTML-escaped.
    """
    result = []
    open_spans = 0

    for part in ANSI_PATTERN.split(text):
        match = ANSI_CODES.fullmatch(part)
        if not match:
            result.append(html.escape(part, quote=False))
            continue
        params = iter(match.group(1).split(';'))
        for code in params:
            if code in ('0', ''):
                result.append('</span>' * open_spans)
                open_spans = 0
            elif code == '1':
                result.append('<span style="font-weight:bold">')
                open_spans += 1
            elif code in ANSI_COLORS:
                result.append(f'<span style="color:{ANSI_COLORS[code]}">')
                open_spans += 1
            elif code in ANSI_BG_COLORS:
                result.append(f'<span style="background:{ANSI_BG_COLORS[code]}">')
                open_spans += 1
            elif code in ('38', '48'):
                color = _extended_color(params)
                if color is not None:
                    prop = 'color' if code == '38' else 'background'
                    result.append(f'<span style="{prop}:{color}">')
                    open_spans += 1

    result.append('</span>' * open_spans)
    return ''.join(result)

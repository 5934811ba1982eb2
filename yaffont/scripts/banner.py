"""
Print a banner using a yaff bitmap font
licence: https://opensource.org/licenses/MIT
"""

import sys
import argparse
import logging

import yaffont
from yaffont.base import Coord, to_codepoint_value, safe_import, require
from yaffont.scripting import wrap_main
Image = safe_import('PIL.Image')


def unescape(text):
    """Interpolate escape sequences."""
    # raw-unicode-escape leaves existing backslashes untouched but escapes non-latin-1
    # unicode-escape then unescapes standard c escapes, \x.. and \u.. \U..
    return text.encode('raw-unicode-escape').decode('unicode_escape')


def to_codes(text):
    """Convert comma-separated code notation to list of int."""
    return [
        to_codepoint_value(_c)
        for _c in text.split(',') if _c.strip()
    ]


def get_parser():
    parser = argparse.ArgumentParser(
        description='Render text with a yaff bitmap font.'
    )
    parser.add_argument(
        'text', nargs='*', type=str, action='extend',
        help=(
            'text to be printed. '
            'multiple text arguments represent consecutive lines. '
            'if not given, read from standard input'
        )
    )
    parser.add_argument(
        '--font', '-f', type=str, required=True,
        help='yaff font file to use when printing text'
    )
    parser.add_argument(
        '--codes', type=to_codes, default=None,
        help=(
            'render comma-separated numeric codes (decimal, 0x hex or 0o octal) '
            'instead of text'
        )
    )
    parser.add_argument(
        '--ink', '--foreground', '-fg', type=str, default='',
        help=(
            'character or colour to use for ink/foreground '
            '(default: @ for text output, white for image output)'
        )
    )
    parser.add_argument(
        '--paper', '--background', '-bg', type=str, default='.',
        help='character to use for paper/background in text output (default: .)'
    )
    parser.add_argument(
        '--spacing', type=int, default=0,
        help='number of pixels between glyphs (default: 0)'
    )
    parser.add_argument(
        '--scale', '-s', type=Coord.create, default=(1, 1),
        help='number of pixels or characters per font pixel in x and y direction (default: 1,1)'
    )
    parser.add_argument(
        '--output', '-o', default='', type=str,
        help=(
            'output file name. use .txt extension for text output, '
            'or image format for image output (default: text to standard output)'
        )
    )
    parser.add_argument(
        '--workers', type=int, default=None,
        help='number of threads to compile glyphs on'
    )
    parser.add_argument(
        '--debug', action='store_true',
        help='show debugging output'
    )
    return parser


def render_lines(font, lines, fill, spacing):
    """Render each line of text; returns list of surfaces."""
    return [
        font.render(_line, fill, spacing=spacing).surface
        for _line in lines
    ]


def to_text(surfaces, ink, paper, scale):
    """Convert rendered lines to text."""
    output = []
    for surface in surfaces:
        text = surface.as_text(ink=ink * scale.x, paper=paper * scale.x)
        output.extend(
            _row
            for _row in text.splitlines()
            for _ in range(scale.y)
        )
    return '\n'.join(output) + '\n'


def to_image(surfaces, scale):
    """Stack rendered lines into one image."""
    require(Image, 'Image output', 'Pillow')
    width = max((_s.width for _s in surfaces), default=0)
    height = sum(_s.height for _s in surfaces)
    image = Image.new('RGBA', (width, height), (0, 0, 0, 0))
    y = 0
    for surface in surfaces:
        image.paste(surface.image, (0, y))
        y += surface.height
    if scale != (1, 1):
        image = image.resize(
            (width * scale.x, height * scale.y), resample=Image.Resampling.NEAREST
        )
    return image


def main():
    parser = get_parser()
    args = parser.parse_args()

    with wrap_main(args.debug):
        font = yaffont.load(args.font, workers=args.workers)
        logging.debug('Loaded %r', font)
        logging.debug('Font properties:\n%s', font.properties)
        if args.codes is not None:
            lines = [args.codes]
        else:
            # read text from stdin if not supplied
            if not args.text:
                text = sys.stdin.read()
            else:
                # multiple options or \n give line breaks
                text = '\n'.join(args.text)
            lines = unescape(text).splitlines()
        scale = Coord.create(args.scale)
        image_output = args.output and not args.output.endswith('.txt')
        if image_output:
            fill = args.ink or 'white'
        else:
            fill = 'white'
        surfaces = render_lines(font, lines, fill, args.spacing)
        if image_output:
            to_image(surfaces, scale).save(args.output)
            return
        text = to_text(surfaces, unescape(args.ink or '@'), unescape(args.paper), scale)
        if args.output:
            with open(args.output, 'w', encoding='utf-8') as outfile:
                outfile.write(text)
        else:
            sys.stdout.write(text)


if __name__ == '__main__':
    main()

import sys
import time
from argparse import ArgumentParser
from pathlib import Path

from newton import (
    FractalConfig,
    Polynomial,
    RenderParameters,
    format_complex,
    format_polynomial,
    palette_from_colormap,
    parse_hex_color,
    parse_root,
    render_frame,
    to_rgb,
    validate_config,
    write_single_image,
)
from newton.config import DEFAULT_MAX_STEPS, DEFAULT_PIXELS_PER_UNIT, DEFAULT_ROOTS, PRECISIONS
from newton.palette import DEFAULT_PALETTE

_VERBOSE_FLAGS = {"--verbose", "-v"}
VERBOSE = any(arg in _VERBOSE_FLAGS for arg in sys.argv[1:])


def log(message, *args, **kwargs):
    if VERBOSE:
        print(message, *args, **kwargs)


def build_parser():
    parser = ArgumentParser(description="Render a Newton fractal to an image file.")

    parser.add_argument('--pixels-per-unit', type=int,
                        dest='pixels_per_unit', help='number of pixels per unit length of the complex plane',
                        metavar='PPU', default=DEFAULT_PIXELS_PER_UNIT)

    parser.add_argument('--x-res', type=int,
                        dest='x_res', help='image width in pixels (default: 8 units)',
                        metavar='X_RES', default=None)

    parser.add_argument('--y-res', type=int,
                        dest='y_res', help='image height in pixels (default: 6 units)',
                        metavar='Y_RES', default=None)

    parser.add_argument('--max-steps', type=int,
                        dest='max_steps', help='maximum number of Newton steps per pixel',
                        metavar='MAX_STEPS', default=DEFAULT_MAX_STEPS)

    parser.add_argument('--root', dest='roots', action='append', metavar='ROOT',
                        help='root of the polynomial, e.g. "-1" or "0.5+0.866i". May be repeated; order selects the color.')

    palette_group = parser.add_mutually_exclusive_group()
    palette_group.add_argument('--color', dest='colors', action='append', metavar='HEX',
                               help='color (#RRGGBB) for the root with the same position. May be repeated.')
    palette_group.add_argument('--colormap', type=str, dest='colormap', metavar='COLORMAP',
                               help='matplotlib colormap to sample one color per root from (e.g. "viridis")')

    parser.add_argument('--precision', choices=sorted(PRECISIONS), default='double',
                        help='floating point precision of the complex arithmetic')

    parser.add_argument('--output', dest='output', type=str, default='img.ppm',
                        help='destination image file')

    parser.add_argument('--format', type=str, dest='format', metavar='FORMAT', default=None,
                        help='output file format: "ppm", or any extension supported by Pillow. Default: the output suffix, else "ppm".')

    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Enable verbose logging.')

    return parser


def resolve_output(opt, parser: ArgumentParser) -> tuple[Path, str]:
    output_path = Path(opt.output).expanduser()
    image_format = (opt.format or output_path.suffix or "ppm").lower().lstrip(".")
    if not image_format:
        parser.error("--format must not be empty.")

    if output_path.suffix:
        if opt.format and output_path.suffix.lower().lstrip(".") != image_format:
            parser.error(f"--output extension {output_path.suffix} does not match --format {image_format}.")
    else:
        output_path = output_path.with_suffix(f".{image_format}")
    return output_path.resolve(), image_format


def build_config(opt, parser: ArgumentParser) -> FractalConfig:
    try:
        roots = tuple(parse_root(value) for value in opt.roots) if opt.roots else DEFAULT_ROOTS
        if opt.colors:
            palette = tuple(parse_hex_color(value) for value in opt.colors)
        elif opt.colormap:
            palette = palette_from_colormap(opt.colormap, len(roots))
        else:
            palette = DEFAULT_PALETTE

        ppu = opt.pixels_per_unit
        config = FractalConfig(
            pixels_per_unit=ppu,
            x_res=opt.x_res if opt.x_res is not None else 8 * ppu,
            y_res=opt.y_res if opt.y_res is not None else 6 * ppu,
            max_steps=opt.max_steps,
            roots=roots,
            palette=palette,
            precision=opt.precision,
        )
        return validate_config(config)
    except ValueError as exc:
        # ConfigurationError and malformed --root/--color values alike.
        parser.error(str(exc))


def _report_row(row, total):
    log("row {0} out of {1}".format(row + 1, total), end='\r')


def main(argv=None):
    parser = build_parser()
    opt = parser.parse_args(argv)

    global VERBOSE
    VERBOSE = bool(opt.verbose)

    config = build_config(opt, parser)
    output_path, image_format = resolve_output(opt, parser)

    log("Image: %dx%d, %d px/unit, %d steps, %s precision"
        % (config.x_res, config.y_res, config.pixels_per_unit, config.max_steps, config.precision))
    for index, root in enumerate(config.roots):
        log("Root %d: %s -> RGB%s" % (index, format_complex(root), to_rgb(config.palette[index])))

    dtype = config.complex_dtype
    polynomial = Polynomial.from_roots(config.roots, dtype=dtype)
    derivative = polynomial.derivative()
    print("Pol: {}".format(format_polynomial(polynomial)))
    print("Der: {}".format(format_polynomial(derivative)))

    started = time.perf_counter()
    result = render_frame(
        polynomial,
        derivative,
        config.roots,
        config.palette,
        RenderParameters.from_config(config),
        dtype=dtype,
        on_row=_report_row if VERBOSE else None,
    )
    log("")
    log("Rendered in %.2fs" % (time.perf_counter() - started))

    write_single_image(result.pixels, output_path, image_format)
    log("Wrote %s" % output_path)


if __name__ == '__main__':
    main()

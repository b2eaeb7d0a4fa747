"""
Noise Map Building CLI Commands for PyCoherent

Command line interface for rendering a generator module, optionally rotated
and distorted by turbulence, into a .npy array or a PNG image.
"""

import logging
import sys
from pathlib import Path

import click

import pycoherent as pc

_QUALITIES = {
    "fast": pc.NoiseQuality.QUALITY_FAST,
    "std": pc.NoiseQuality.QUALITY_STD,
    "best": pc.NoiseQuality.QUALITY_BEST,
}


def _make_generator(module, frequency, lacunarity, octaves, persistence, quality, seed,
                    displacement, enable_distance):
    if module == "voronoi":
        return pc.module.Voronoi(
            frequency=frequency,
            displacement=displacement,
            enable_distance=enable_distance,
            seed=seed,
        )
    generator_class = pc.module.Perlin if module == "perlin" else pc.module.Billow
    return generator_class(
        frequency=frequency,
        lacunarity=lacunarity,
        octave_count=octaves,
        persistence=persistence,
        quality=_QUALITIES[quality],
        seed=seed,
    )


@click.command()
@click.argument("output", type=click.Path())
@click.option(
    "--module",
    "module",
    type=click.Choice(["perlin", "billow", "voronoi"]),
    default="perlin",
    show_default=True,
    help="Generator module to render",
)
@click.option("--frequency", type=float, default=None, help="Generator frequency")
@click.option("--lacunarity", type=float, default=None, help="Perlin/Billow lacunarity")
@click.option("--octaves", type=int, default=None, help="Perlin/Billow octave count")
@click.option("--persistence", type=float, default=None, help="Perlin/Billow persistence")
@click.option(
    "--quality",
    type=click.Choice(list(_QUALITIES)),
    default="std",
    show_default=True,
    help="Perlin/Billow noise quality",
)
@click.option("--seed", type=int, default=0, show_default=True, help="Generator seed")
@click.option("--displacement", type=float, default=None, help="Voronoi displacement")
@click.option(
    "--enable-distance", is_flag=True, default=False, help="Add the distance term to Voronoi output"
)
@click.option(
    "--bounds",
    type=float,
    nargs=4,
    default=(0.0, 4.0, 0.0, 4.0),
    show_default=True,
    metavar="LOWER_X UPPER_X LOWER_Z UPPER_Z",
    help="Window of the plane to render",
)
@click.option(
    "--size",
    type=int,
    nargs=2,
    default=(256, 256),
    show_default=True,
    metavar="WIDTH HEIGHT",
    help="Size of the map in cells",
)
@click.option("--seamless", is_flag=True, default=False, help="Render a seamlessly tileable map")
@click.option(
    "--turbulence",
    type=float,
    default=None,
    metavar="POWER",
    help="Distort the generator with turbulence of the given power",
)
@click.option(
    "--rotate",
    type=float,
    nargs=3,
    default=None,
    metavar="X Y Z",
    help="Rotate the input coordinates by these angles (degrees)",
)
@click.option("--uint", is_flag=True, default=False, help="Save PNG as uint8 instead of uint16")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
def build_noise_map(output, module, frequency, lacunarity, octaves, persistence, quality, seed,
                    displacement, enable_distance, bounds, size, seamless, turbulence, rotate,
                    uint, verbose):
    """
    Render a noise map and save it as .npy or .png.

    Builds the selected generator, optionally wraps it in a rotation and a
    turbulence module, renders it over the given window of the plane and
    writes the result. The format follows the OUTPUT suffix.

    OUTPUT: Path of the output file (.npy or .png)

    Examples:

        # 256x256 Perlin map as a 16-bit PNG
        pcn-build terrain.png

        # Tileable Billow map with turbulence
        pcn-build clouds.png --module billow --seamless --turbulence 0.25

        # Voronoi cells as a numpy array
        pcn-build cells.npy --module voronoi --frequency 8 --size 512 512
    """
    try:
        if verbose:
            logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

        suffix = Path(output).suffix.lower()
        if suffix not in (".npy", ".png"):
            raise click.BadParameter(
                f"unsupported output format '{suffix}', use .npy or .png", param_hint="OUTPUT"
            )

        source = _make_generator(
            module, frequency, lacunarity, octaves, persistence, quality, seed,
            displacement, enable_distance,
        )
        if rotate is not None:
            source = pc.module.RotatePoint(source, *rotate)
        if turbulence is not None:
            source = pc.module.Turbulence(source, power=turbulence, seed=seed)

        if verbose:
            click.echo(f"Source module: {source!r}")

        builder = pc.raster.NoiseMapBuilderPlane(source, pc.raster.NoiseMap(), seamless=seamless)
        builder.set_dest_size(*size)
        builder.set_bounds(*bounds)

        if verbose:
            click.echo(f"Building {size[0]}x{size[1]} noise map...")

        noise_map = builder.build()

        if suffix == ".npy":
            pc.misc.save_noise_map_numpy(noise_map, output)
        else:
            pc.misc.save_noise_map_png(noise_map, output, uint=uint)

        click.echo(f"Saved {module} noise map -> '{output}'")

    except click.BadParameter:
        raise

    except pc.InvalidParameterError as e:
        click.echo(f"Error: Invalid parameter - {e}", err=True)
        sys.exit(1)

    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


if __name__ == "__main__":
    build_noise_map()

import pycoherent as pc
import numpy as np
import time

# Base terrain: hills blended with cellular plateaus, using slow billows as the mask
hills = pc.module.Perlin(frequency=2.0, octave_count=8, persistence=0.45, seed=1)
plateaus = pc.module.Voronoi(frequency=3.0, displacement=0.5, seed=2)
mask = pc.module.Billow(frequency=0.5, octave_count=4, seed=3)

terrain = pc.module.Blend(hills, plateaus, mask)
terrain = pc.module.RotatePoint(terrain, z_angle=20.0)
terrain = pc.module.Turbulence(terrain, frequency=4.0, power=0.0625, roughness=3, seed=4)

nx, ny = 512, 512

noise_map = pc.raster.NoiseMap(border_value=-1.0)
builder = pc.raster.NoiseMapBuilderPlane(terrain, noise_map, seamless=True)
builder.set_dest_size(nx, ny)
builder.set_bounds(2.0, 6.0, 1.0, 5.0)

st = time.time()
builder.build()
print(f"built {nx}x{ny} in {time.time() - st:.2f}s")

heights = noise_map.to_numpy()
print("min/max:", heights.min(), heights.max())

# 2x2 tiling should show no seams
tiled = np.tile(heights, (2, 2))
tiled_map = pc.raster.NoiseMap(2 * nx, 2 * ny)
for row in range(2 * ny):
	tiled_map.get_row(row)[:] = tiled[row]

pc.misc.save_noise_map_png(noise_map, "terrain.png")
pc.misc.save_noise_map_png(tiled_map, "terrain_tiled.png")

## hexagon rosette and octagon grid drawing example for tessCAD
print("rosette_demo.py -- tessCAD DXF tessellation example")

from tesscad.centers import generate_hex_centers_radial, generate_grid_centers
from tesscad.ezdxf_exporter import write_tiles_dxf
from tesscad.tiles import layout_tiles, secondary_centers

RADIUS = 5.0

## a four-level honeycomb rosette with a red-to-blue gradient and the
## interstitial centres marked
centers = generate_hex_centers_radial(RADIUS, 4)
tiles = layout_tiles(centers, RADIUS, 'hex', spacing=0.6, color_scheme='scheme1')
filename = "rosette-out"
print("\nOutput file name is {}.dxf".format(filename))
write_tiles_dxf(tiles, filename, markers=secondary_centers(centers))

## a 6x4 octagon grid, turned so that neighbours share flat sides
centers = generate_grid_centers(RADIUS, 6, 4, 'octagon')
tiles = layout_tiles(centers, RADIUS, 'octagon', spacing=0.6, color_scheme='scheme6')
filename = "octagons-out"
print("Output file name is {}.dxf".format(filename))
write_tiles_dxf(tiles, filename)

# minirt

A small ray tracer. It reads a scene described in a `.rt` text file, checks it,
and opens a window showing the rendered image: spheres drawn in flat colour
over a sky-blue gradient, as seen from the scene's camera.

## Installing

    pip install .

The window is drawn with pygame, which is installed as a dependency.

## Running

    minirt scene.rt

Exactly one argument, the path to the scene, is expected. The file name must
end in `.rt`, and the file must exist, be readable and not be empty. If any of
this fails, or the scene itself is invalid, the error message is printed to
standard error and the command exits with status 1.

The image is 800 by 600 pixels.

### Keys in the window

| Key            | Effect                                              |
|----------------|-----------------------------------------------------|
| Up / Down      | move the camera up or down by one unit              |
| Left / Right   | move the camera left or right by one unit           |
| A / D          | add 1 to / subtract 1 from the direction's x part   |
| Escape         | close the window (exit status 1)                    |

The image is rendered again after every move. Closing the window normally
exits with status 0.

## Scene files

Each line names one element by its identifier, followed by its fields
separated by spaces. Vectors and colours are written as exactly three
comma-separated numbers. Lines starting with `#`, blank lines and lines in
which no known identifier appears within the first three characters are
skipped.

    # identifier  fields
    A   0.2                 255,255,255
    C   0,0,0               0,0,-1        70
    L   -40,50,0            0.6           255,255,255
    sp  0,0,-5              1.5           123,0,0
    pl  0,-2,0              0,1,0         200,200,200

| Identifier | Element  | Fields                                      |
|------------|----------|---------------------------------------------|
| `A`        | ambient  | intensity (0.0–1.0), colour                 |
| `C`        | camera   | position, direction, field of view (0–180)  |
| `L`        | light    | position, intensity (0.0–1.0), colour       |
| `sp`       | sphere   | centre, radius, colour                      |
| `pl`       | plane    | point, normal (not 0,0,0), colour           |
| `cy`       | cylinder | recognised, then ignored                    |

Rules that are checked:

- exactly one ambient light and exactly one camera;
- every field may hold only digits, `-`, `.` and `,`;
- each element has at least its listed number of fields;
- colour channels range from 0 to 255.

Numbers are read leniently: a leading sign and digits with an optional
decimal part, no exponent; anything after that is ignored.

## What it does not do

Only spheres are drawn. Planes and lights are read and checked but do not
appear in the image, the ambient light is not applied, and there is no
shading or shadowing: a sphere that a ray meets is painted in its own colour
(the first such sphere in file order wins). Cylinders are recognised and
skipped. Images cannot be saved to a file from the command.

## Using it from Python

    from minirt.scene import load_scene
    from minirt.render import init_camera, render

    scene = load_scene("scene.rt")
    init_camera(scene.camera)
    image = render(scene, 800, 600)   # RGBA bytes, row by row from the top

- `minirt.scene.load_scene(path)` returns a `Scene` with `ambient`, `camera`,
  `lights`, `planes` and `spheres`. `build_scene(tokens)` does the same from
  tokens made by `minirt.tokens.tokenize_scene(path)` or
  `tokenize_lines(lines)`. Rejected input raises `minirt.tokens.SceneError`.
- `minirt.render` has `init_camera`, `primary_ray`, `hit_sphere` (returns the
  discriminant; non-negative means a hit), `lerp`, `lerp_color` and `render`.
  `render` must be given a camera already set up by `init_camera`.
- `minirt.controls.apply_key(camera, key)` applies one `Key` move to a camera.
- `minirt.vector.Vec3` is the immutable 3-D vector used throughout, with `+`,
  `-`, `*` by a number, `dot`, `cross`, `length` and `normalized`. Note that
  its `cross` has the sign of the middle component reversed compared with the
  usual cross product; the camera basis is built with it.
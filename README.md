# scatterkit

Tools for reading the parameters of the scattering orders of laser light on
opaque particles, along with small helpers for writing gnuplot scripts and
gnuplot style options.

## What is inside

- `scatterkit.utility`: angle conversion (`radians`), tolerant float
  comparison (`almost_equal`) and list builders (`generate_linspace`,
  `generate_linspace_with_step`, `generate_zero_array`,
  `generate_number_array`). `generate_linspace(x0, x1, n)` returns `n` values
  starting at `x0` and stops short of `x1`; with `n == 0` it returns `[x0]`.
- `scatterkit.parameters`: the `Polarization` and `ScatteringMode` enums, the
  `ScatteringOrderParameters` dataclass, and `ParameterHolder`. A holder maps
  each mode to one or more parameter sets, kept in the order they were added.
  `holder[mode]` returns the first set for a mode (a `KeyError` if there is
  none), `holder.select(mode)` returns all of them, and `len(holder)` counts
  every set.
- `scatterkit.single_parser`: `SingleSignalParametersParser` reads one
  scattering order from a whitespace-separated table. Each row holds the
  refractive index, the scattering angle, the order's angle in degrees and two
  amplitudes. The angle is stored in radians, negated for `P0`.
  - `parse(mode, path, theta_sca)` returns the matching parameters, or `None`
    with a warning when the angle is not in the file.
  - `parse_many(mode, path, thetas)` looks the angles up one after another
    down the file and returns one entry per angle; an angle that is not found
    leaves a default entry carrying only the mode.
  - `P21ParametersParser` offers the same two methods fixed to `P21`.
- `scatterkit.multiple_parser`: `MultipleSignalParametersParser` reads several
  orders from one row per scattering angle: refractive index, scattering
  angle, an ignored reference angle, one angle per mode, then one amplitude
  pair per mode starting in the sixth column. `parse` returns a
  `ParameterHolder` (empty, with a warning, when the angle is absent);
  `parse_many` collects every angle it finds in file order and warns if none
  were found.
- `scatterkit.gnuplot`: string helpers for gnuplot scripts and data sets
  (`write_dataset`, `format_rows`, `command_value_str`, `size_str`,
  `multiplot_cmd`, `show_terminal_cmd`, `save_terminal_cmd`, `output_cmd`,
  `clean_path`, `Angle`, `rgb` and more), and `run_script`, which runs the
  `gnuplot` executable on a script file and returns whether it succeeded.
  gnuplot must be on your `PATH` for that one call.
- `scatterkit.plot_types`: `Extension`, `ColumnIndex`, `StringOrDouble`,
  `linspace` (end point included) and `unit_range`, plus default style
  constants such as `DEFAULT_PALETTE` and `DEFAULT_FIGURE_HEIGHT`.
- `scatterkit.specs` and `scatterkit.fill_specs`: chainable builders for line,
  point, font, offset, fill, filled-curve and histogram style options
  (`LineSpecs`, `PointSpecs`, `FontSpecs`, `OffsetSpecs`, `FillSpecs`,
  `FilledCurvesSpecs`, `HistogramStyleSpecs`). Call `render()` or `str()` on a
  builder to get its gnuplot text.

## Example

```python
from scatterkit.parameters import ScatteringMode
from scatterkit.single_parser import SingleSignalParametersParser
from scatterkit.utility import generate_linspace

parser = SingleSignalParametersParser()
params = parser.parse(ScatteringMode.P0, "p0_table.txt", 30.0)
if params is not None:
    print(params.m, params.theta, params.amp_p1, params.amp_p2)

time = generate_linspace(-20.0, 20.0, 1000)
```

```python
from scatterkit.specs import LineSpecs

print(LineSpecs().line_width(3).line_color("#404040").render())
# linewidth 3 linecolor '#404040'
```

## What it does not do

- It does not compute scattering signals from the parsed parameters, and it
  does not build or save training datasets; it stops at reading the
  parameter tables.
- It has no plot or figure objects that assemble a whole gnuplot script from
  curves. It gives the pieces (data set blocks, terminal and output commands,
  style options) and `run_script` to run a script you have written.
- There is no command-line program.

## Tests

```
pip install -e .[test]
pytest
```
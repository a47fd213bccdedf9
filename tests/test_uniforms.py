import itertools

import pytest

from polyshade.angle import Angle3D, Transformation3D
from polyshade.uniforms import (
    DepthUniform,
    FloatUniform,
    ScaleUniform,
    ShaderProgram,
    TransformationUniform,
    depth_data,
    scale_data,
)
from polyshade.vectors import Point3D

_ids = itertools.count(1000)


def make_program(**locations):
    return ShaderProgram(next(_ids), locations)


def test_find_uniform_known_and_missing():
    program = make_program(view=4)
    assert program.find_uniform("view") == 4
    assert program.find_uniform("nothing") == -1


def test_use_makes_current_and_switches():
    a = make_program()
    b = make_program()
    a.use()
    assert a.is_current() and not b.is_current()
    b.use()
    assert b.is_current() and not a.is_current()


def test_set_while_unbound_defers_until_use():
    program = make_program(depthFactor=2)
    other = make_program()
    other.use()
    depth = DepthUniform(program, "depthFactor")
    depth.value(1.0, 3.0)
    assert program.uploads == []
    assert depth.pending == depth_data(1.0, 3.0)
    program.use()
    assert program.uploads == [(2, 1, 7, depth_data(1.0, 3.0))]
    assert depth.pending is None


def test_set_while_bound_uploads_immediately():
    program = make_program(contentScale=1)
    program.use()
    scale = ScaleUniform(program, "contentScale")
    scale.value(640, 480)
    assert program.uploads == [(1, 2, 2, scale_data(640, 480))]
    assert scale.pending is None


def test_update_without_current_keeps_pending():
    program = make_program(x=0)
    make_program().use()
    uniform = FloatUniform(program, "x", 3, 1)
    uniform.set([1, 2, 3])
    uniform.update()
    assert uniform.pending == (1.0, 2.0, 3.0)
    assert program.uploads == []


def test_set_too_short_raises():
    program = make_program(x=0)
    uniform = FloatUniform(program, "x", 2, 2)
    with pytest.raises(ValueError):
        uniform.set([1.0, 2.0, 3.0])


def test_transformation_uploads_position_sines_cosines():
    program = make_program(view=3)
    program.use()
    trans = Transformation3D(Point3D(1, 2, 3), Angle3D(0.1, 0.2, 0.3))
    TransformationUniform(program, "view").value(trans)
    location, components, count, data = program.uploads[-1]
    assert (location, components, count) == (3, 3, 3)
    assert data == trans.to_floats()[:9]
    assert data[:3] == (1.0, 2.0, 3.0)


def test_depth_data_relations():
    near, far = 0.1, 1000.0
    data = depth_data(near, far)
    assert len(data) == 7
    assert data[:2] == (near, far)
    assert data[5] * data[2] == pytest.approx(data[3])
    assert data[6] * data[2] == pytest.approx(data[4])


def test_scale_data_square():
    assert scale_data(500, 500) == (500, 500, 1.0, 1.0)


def test_scale_data_wide_and_tall():
    wide = scale_data(800, 400)
    assert wide[3] == 1.0
    assert wide[2] * 800 == pytest.approx(400)
    tall = scale_data(400, 800)
    assert tall[2] == 1.0
    assert tall[3] * 800 == pytest.approx(400)
from pixelkit.image import Image, Instance
from pixelkit.renderqueue import DrawCall, sort_render_queue


def _call(image, z):
    image.instances.append(Instance(0, 0, z))
    return DrawCall(image, len(image.instances) - 1)


def test_instance_lookup():
    img = Image(2, 2)
    img.instances.extend([Instance(1, 2, 3), Instance(4, 5, 6)])
    call = DrawCall(img, 1)
    assert call.instance() is img.instances[1]


def test_sort_by_depth():
    img = Image(2, 2)
    calls = [_call(img, z) for z in (5, 1, 3, 0, 4)]
    result = sort_render_queue(calls)
    depths = [call.instance().z for call in result]
    assert depths == sorted(depths)
    assert depths == [0, 1, 3, 4, 5]


def test_sort_is_permutation():
    img = Image(2, 2)
    calls = [_call(img, z) for z in (2, 2, 1, 7)]
    result = sort_render_queue(calls)
    assert sorted(map(id, result)) == sorted(map(id, calls))


def test_equal_depth_reversed():
    first = Image(1, 1)
    second = Image(1, 1)
    a = _call(first, 1)
    b = _call(second, 1)
    assert sort_render_queue([a, b]) == [b, a]


def test_empty_queue():
    assert sort_render_queue([]) == []


def test_input_not_modified():
    img = Image(2, 2)
    calls = [_call(img, z) for z in (3, 1)]
    original = list(calls)
    sort_render_queue(calls)
    assert calls == original
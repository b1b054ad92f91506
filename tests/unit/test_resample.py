"""Unit tests for the resampling entry points and their output properties."""

import math

import numpy as np
import pytest

from pixscale import (
    DimensionsTooLarge,
    InvalidDimensions,
    Method,
    PixelBuffer,
    ResizeCancelled,
    ResizeLimits,
    ResizeRequest,
    UnsupportedMethod,
    resample,
    resize,
)
from pixscale.resamplers.mapping import bilinear_taps

RED = (255, 0, 0, 255)
GREEN = (0, 255, 0, 255)
BLUE = (0, 0, 255, 255)
YELLOW = (255, 255, 0, 255)

ALL_METHODS = ["nearest", "bilinear", "bicubic"]


def _clamp(i, n):
    return min(max(i, 0), n - 1)


def _cubic(t):
    a = abs(t)
    a2 = a * a
    a3 = a2 * a
    if a <= 1.0:
        return 1.0 - 2.0 * a2 + a3
    if a <= 2.0:
        return 4.0 - 8.0 * a + 5.0 * a2 - a3
    return 0.0


def _to_byte(v):
    return min(max(math.floor(v + 0.5), 0), 255)


def reference_resize(src, dst_w, dst_h, method):
    """Per-pixel, per-channel resize written directly from the formulas."""
    src_h, src_w, channels = src.shape
    sx = src_w / dst_w
    sy = src_h / dst_h
    out = np.zeros((dst_h, dst_w, channels), dtype=np.uint8)
    for y in range(dst_h):
        for x in range(dst_w):
            if method == "nearest":
                out[y, x] = src[_clamp(math.floor(y * sy), src_h), _clamp(math.floor(x * sx), src_w)]
                continue
            cx = (x + 0.5) * sx - 0.5
            cy = (y + 0.5) * sy - 0.5
            bx, by = math.floor(cx), math.floor(cy)
            fx, fy = cx - bx, cy - by
            for c in range(channels):
                if method == "bilinear":
                    x0, x1 = _clamp(bx, src_w), _clamp(min(bx + 1, src_w - 1), src_w)
                    y0, y1 = _clamp(by, src_h), _clamp(min(by + 1, src_h - 1), src_h)
                    v = (
                        (1.0 - fx) * (1.0 - fy) * float(src[y0, x0, c])
                        + fx * (1.0 - fy) * float(src[y0, x1, c])
                        + (1.0 - fx) * fy * float(src[y1, x0, c])
                        + fx * fy * float(src[y1, x1, c])
                    )
                else:
                    acc = 0.0
                    wsum = 0.0
                    for j in range(-1, 3):
                        row = _clamp(by + j, src_h)
                        for i in range(-1, 3):
                            w = _cubic(j - fy) * _cubic(i - fx)
                            acc += w * float(src[row, _clamp(bx + i, src_w), c])
                            wsum += w
                    v = acc / wsum if wsum != 0 else 0.0
                out[y, x, c] = _to_byte(v)
    return out


class TestOutputContract:
    """Size and shape of every successful result."""

    @pytest.mark.unit
    @pytest.mark.parametrize("method", ALL_METHODS)
    @pytest.mark.parametrize("size", [(1, 1), (3, 11), (14, 10), (7, 5), (2, 40)])
    def test_dimension_contract(self, random_source, method, size):
        w, h = size
        out = resize(random_source, w, h, method=method)
        assert (out.width, out.height) == (w, h)
        assert len(out.tobytes()) == w * h * 4

    @pytest.mark.unit
    @pytest.mark.parametrize("method", ALL_METHODS)
    def test_source_untouched(self, random_source, method):
        before = random_source.tobytes()
        out = resize(random_source, 9, 4, method=method)
        assert random_source.tobytes() == before
        assert not out.frozen

    @pytest.mark.unit
    def test_accepts_enum_and_request(self, quad_source):
        req = ResizeRequest(quad_source, 4, 4, Method.NEAREST)
        assert resample(req) == resize(quad_source, 4, 4, method="nearest")

    @pytest.mark.unit
    def test_rejects_non_buffer_source(self):
        with pytest.raises(TypeError):
            resample(ResizeRequest(b"\x00" * 4, 1, 1, "nearest"))


class TestNearest:
    """Nearest-neighbor copies, never blends."""

    @pytest.mark.unit
    def test_quad_upscale_reproduces_blocks(self, quad_source):
        out = resize(quad_source, 4, 4, method="nearest")
        px = out.pixels
        assert (px[0:2, 0:2] == RED).all()
        assert (px[0:2, 2:4] == GREEN).all()
        assert (px[2:4, 0:2] == BLUE).all()
        assert (px[2:4, 2:4] == YELLOW).all()

    @pytest.mark.unit
    @pytest.mark.parametrize("size", [(3, 2), (13, 11), (4, 9), (1, 1)])
    def test_purity(self, random_source, size):
        src_pixels = {tuple(p) for p in random_source.pixels.reshape(-1, 4).tolist()}
        out = resize(random_source, *size, method="nearest")
        for p in out.pixels.reshape(-1, 4).tolist():
            assert tuple(p) in src_pixels

    @pytest.mark.unit
    def test_downscale_uses_floor_mapping(self):
        # 5x1 -> 2x1: floor(0 * 2.5) = 0, floor(1 * 2.5) = 2
        data = np.zeros((1, 5, 4), dtype=np.uint8)
        data[0, :, 0] = [10, 20, 30, 40, 50]
        out = resize(PixelBuffer.from_array(data), 2, 1, method="nearest")
        assert out.pixels[0, :, 0].tolist() == [10, 30]


class TestBilinear:
    """2x2 weighted averages."""

    @pytest.mark.unit
    def test_quad_to_single_pixel_averages_corners(self, quad_source):
        out = resize(quad_source, 1, 1, method="bilinear")
        # R = G = (255 + 255) / 4 = 127.5, B = 255 / 4 = 63.75
        assert out.get(0, 0) == (128, 128, 64, 255)

    @pytest.mark.unit
    def test_ramp_upscale(self, ramp_source):
        out = resize(ramp_source, 4, 1, method="bilinear")
        assert out.pixels[0, :, 0].tolist() == [0, 64, 191, 255]
        assert (out.pixels[0, :, 3] == 255).all()

    @pytest.mark.unit
    @pytest.mark.parametrize("size", [(13, 11), (3, 2), (20, 3), (4, 9)])
    def test_boundedness(self, random_source, size):
        w, h = size
        src = random_source.pixels.astype(int)
        out = resize(random_source, w, h, method="bilinear").pixels.astype(int)
        x0, x1, _ = bilinear_taps(w, random_source.width / w, random_source.width)
        y0, y1, _ = bilinear_taps(h, random_source.height / h, random_source.height)
        for y in range(h):
            for x in range(w):
                hood = np.stack(
                    [src[y0[y], x0[x]], src[y0[y], x1[x]], src[y1[y], x0[x]], src[y1[y], x1[x]]]
                )
                assert (out[y, x] >= hood.min(axis=0)).all()
                assert (out[y, x] <= hood.max(axis=0)).all()


class TestBicubic:
    """4x4 cubic convolution with renormalisation."""

    @pytest.mark.unit
    def test_ramp_upscale_clamps_overshoot(self, ramp_source):
        # Raw sums at the ends are -35.9 and 290.9; both clamp
        out = resize(ramp_source, 4, 1, method="bicubic")
        assert out.pixels[0, :, 0].tolist() == [0, 64, 191, 255]
        assert (out.pixels[0, :, 3] == 255).all()

    @pytest.mark.unit
    def test_vertical_step_edge(self):
        data = np.zeros((4, 4, 4), dtype=np.uint8)
        data[..., 3] = 255
        data[:, 2:, :3] = 200
        src = PixelBuffer.from_array(data)
        out = resize(src, 8, 8, method="bicubic").pixels
        assert out.dtype == np.uint8
        # Columns far from the step keep their value
        assert (out[:, 0, :3] == 0).all()
        assert (out[:, 7, :3] == 200).all()
        # Rows are identical since the source is constant along y
        assert (out == out[0]).all()

    @pytest.mark.unit
    def test_non_square_fractions_differ(self):
        # 2x2 -> 4x1: x fractions alternate .75/.25, every y fraction is .5
        # so rows 0 and 1 each carry half the weight
        data = np.zeros((2, 2, 4), dtype=np.uint8)
        data[..., 3] = 255
        data[:, :, 0] = [[0, 100], [200, 42]]
        out = resize(PixelBuffer.from_array(data), 4, 1, method="bicubic")
        # 104.08, 92.75, 78.25, 66.92
        assert out.pixels[0, :, 0].tolist() == [104, 93, 78, 67]
        assert (out.pixels[0, :, 1:3] == 0).all()
        assert (out.pixels[0, :, 3] == 255).all()


class TestReferenceAgreement:
    """Whole-image comparison against a per-pixel loop on non-square resizes."""

    @pytest.fixture
    def wide_source(self):
        rng = np.random.default_rng(7)
        return rng.integers(0, 256, size=(6, 9, 4), dtype=np.uint8)

    @pytest.mark.unit
    @pytest.mark.parametrize("method", ALL_METHODS)
    @pytest.mark.parametrize("size", [(13, 4), (3, 11), (17, 2), (9, 1), (1, 6)])
    def test_matches_per_pixel_loop(self, wide_source, method, size):
        w, h = size
        out = resize(PixelBuffer.from_array(wide_source), w, h, method=method)
        expected = reference_resize(wide_source, w, h, method)
        assert np.array_equal(out.pixels, expected)


class TestCommonProperties:
    """Properties shared by all methods."""

    @pytest.mark.unit
    @pytest.mark.parametrize("method", ALL_METHODS)
    def test_identity_resize(self, random_source, method):
        out = resize(random_source, random_source.width, random_source.height, method=method)
        assert out == random_source

    @pytest.mark.unit
    @pytest.mark.parametrize("method", ALL_METHODS)
    @pytest.mark.parametrize("size", [(1, 1), (5, 3), (16, 16)])
    def test_single_pixel_fills_uniformly(self, single_pixel, method, size):
        out = resize(single_pixel, *size, method=method)
        assert (out.pixels == (12, 34, 56, 78)).all()

    @pytest.mark.unit
    @pytest.mark.parametrize("method", ALL_METHODS)
    def test_uniform_source_stays_uniform(self, method):
        src = PixelBuffer(6, 4, bytes((90, 180, 45, 200)) * 24)
        out = resize(src, 11, 3, method=method)
        assert (out.pixels == (90, 180, 45, 200)).all()


class TestErrors:
    """Validation happens before any output is allocated."""

    @pytest.mark.unit
    @pytest.mark.parametrize("method", ALL_METHODS)
    @pytest.mark.parametrize("size", [(0, 4), (4, 0), (-1, 2), (2.5, 2), ("4", 4)])
    def test_invalid_target(self, quad_source, monkeypatch, method, size):
        allocations = []
        monkeypatch.setattr(PixelBuffer, "blank", lambda *a: allocations.append(a))
        for _ in range(2):
            with pytest.raises(InvalidDimensions):
                resize(quad_source, *size, method=method)
        assert allocations == []
        assert quad_source.get(0, 0) == RED

    @pytest.mark.unit
    def test_unsupported_method(self, quad_source, monkeypatch):
        allocations = []
        monkeypatch.setattr(PixelBuffer, "blank", lambda *a: allocations.append(a))
        with pytest.raises(UnsupportedMethod):
            resize(quad_source, 4, 4, method="lanczos")
        assert allocations == []

    @pytest.mark.unit
    def test_errors_are_value_errors(self, quad_source):
        with pytest.raises(ValueError):
            resize(quad_source, 0, 1)
        with pytest.raises(ValueError):
            resize(quad_source, 1, 1, method="lanczos")

    @pytest.mark.unit
    def test_pixel_limit(self, quad_source):
        limits = ResizeLimits(max_pixels=100)
        assert resize(quad_source, 10, 10, limits=limits).nbytes == 400
        with pytest.raises(DimensionsTooLarge):
            resize(quad_source, 11, 10, limits=limits)
        out = resize(quad_source, 11, 10, limits=ResizeLimits.unbounded())
        assert out.width == 11

    @pytest.mark.unit
    def test_default_limit_applies(self, quad_source):
        with pytest.raises(DimensionsTooLarge):
            resize(quad_source, 100_000, 100_000)


class TestCancellation:
    """Cooperative cancellation between rows."""

    @pytest.mark.unit
    @pytest.mark.parametrize("method", ALL_METHODS)
    def test_cancel_before_first_row(self, quad_source, method):
        with pytest.raises(ResizeCancelled):
            resize(quad_source, 8, 8, method=method, cancel=lambda: True)

    @pytest.mark.unit
    def test_cancel_mid_way(self, random_source):
        calls = []

        def cancel():
            calls.append(1)
            return len(calls) > 3

        with pytest.raises(ResizeCancelled):
            resize(random_source, 10, 10, method="bilinear", cancel=cancel)
        assert len(calls) == 4

    @pytest.mark.unit
    @pytest.mark.parametrize("method", ALL_METHODS)
    def test_uncancelled_result_unchanged(self, random_source, method):
        plain = resize(random_source, 9, 6, method=method)
        checked = resize(random_source, 9, 6, method=method, cancel=lambda: False)
        assert plain == checked

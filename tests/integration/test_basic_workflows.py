"""
Integration tests for FilterZoom workflows.

Load an image from disk, resample it, save it and read it back, for the
channel layouts the loader supports.
"""
import numpy as np
import pytest
from PIL import Image as PILImage

from pixzoom import resize, resize_array
from pixzoom.main import main
from pixzoom.utils import load_image, resize_nearest, save_image


class TestFileRoundTrips:
    """Resize images of every supported mode through files."""

    @pytest.mark.parametrize("mode,channels", [("L", 1), ("RGB", 3), ("RGBA", 4)])
    def test_load_resize_save(self, tmp_path, mode, channels):
        rng = np.random.default_rng(7)
        shape = (12, 18) if channels == 1 else (12, 18, channels)
        arr = rng.integers(0, 256, size=shape, dtype=np.uint8)
        in_path = tmp_path / "in.png"
        PILImage.fromarray(arr).save(in_path)

        img = load_image(in_path)
        assert img.shape == (12, 18, channels)

        out = resize_array(img, 30, 9, filter="mitchell")
        assert out.shape == (30, 9, channels)

        out_path = tmp_path / "out.png"
        save_image(out, out_path)
        with PILImage.open(out_path) as im:
            assert im.mode == mode
            assert im.size == (9, 30)

        assert np.array_equal(load_image(out_path), out)

    def test_palette_image_loads_as_rgb(self, tmp_path):
        path = tmp_path / "p.png"
        PILImage.new("P", (4, 3)).save(path)
        assert load_image(path).shape == (3, 4, 3)

    def test_save_rejects_bad_arrays(self, tmp_path):
        with pytest.raises(TypeError):
            save_image(np.zeros((2, 2, 3), dtype=np.float32), tmp_path / "x.png")
        with pytest.raises(ValueError):
            save_image(np.zeros((2, 2, 2), dtype=np.uint8), tmp_path / "x.png")
        with pytest.raises(TypeError):
            save_image([[0]], tmp_path / "x.png")


class TestBufferWorkflow:
    """The flat-buffer entry point agrees with the array API."""

    def test_buffer_and_array_agree(self, rgb_noise):
        h, w, c = rgb_noise.shape
        flat = resize(rgb_noise.tobytes(), w, h, c, 50, 7)
        arr = resize_array(rgb_noise, 7, 50)
        assert np.array_equal(flat.reshape(7, 50, 3), arr)

    def test_down_then_up_stays_close(self, smooth_rgb):
        h, w = smooth_rgb.shape[:2]
        small = resize_array(smooth_rgb, h // 2, w // 2, filter="bspline")
        back = resize_array(small, h, w, filter="bspline")
        err = np.abs(back.astype(int) - smooth_rgb.astype(int)).mean()
        assert err < 12

    def test_filtered_beats_nearest_on_downscale(self, smooth_rgb):
        """Averaging kernels track a smooth image better than point sampling."""
        h, w = smooth_rgb.shape[:2]
        noisy = smooth_rgb.astype(int) + np.where(
            (np.indices((h, w)).sum(axis=0) % 2)[..., None] == 1, 20, -20
        )
        noisy = np.clip(noisy, 0, 255).astype(np.uint8)
        truth = resize_array(smooth_rgb, h // 2, w // 3, filter="box").astype(int)
        filt = resize_array(noisy, h // 2, w // 3, filter="box").astype(int)
        near = resize_nearest(noisy, h // 2, w // 3).astype(int)
        assert np.abs(filt - truth).mean() < np.abs(near - truth).mean()


def test_cli_grayscale(tmp_path):
    arr = np.tile(np.arange(0, 250, 10, dtype=np.uint8), (6, 1))
    src = tmp_path / "g.png"
    PILImage.fromarray(arr).save(src)
    dst = tmp_path / "g_out.png"
    assert main(["-i", str(src), "-o", str(dst), "--scale", "3", "--filter", "triangle"]) == 0
    with PILImage.open(dst) as im:
        assert im.mode == "L"
        assert im.size == (75, 18)

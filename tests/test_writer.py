"""Tests for output path construction and writing."""

from b64img.storage.writer import ImageWriter


class TestResolvePath:
    def setup_method(self):
        self.writer = ImageWriter("/work", prefix="image", clock=lambda: 1700000000.5)

    def test_default_name(self):
        assert str(self.writer.resolve_path("png")) == "/work/image_1700000000500.png"

    def test_custom_prefix(self):
        writer = ImageWriter("/work", prefix="converted_image", clock=lambda: 1.0)
        assert str(writer.resolve_path("jpg")) == "/work/converted_image_1000.jpg"

    def test_dotted_prefix_still_gets_extension(self):
        writer = ImageWriter("/work", prefix="img.v2", clock=lambda: 1.0)
        assert str(writer.resolve_path("png")) == "/work/img.v2_1000.png"
        assert str(writer.resolve_path("gif", index=2)) == "/work/img.v2_1000_2.gif"

    def test_relative_output(self):
        assert str(self.writer.resolve_path("gif", output="sub/name")) == "/work/sub/name.gif"

    def test_absolute_output(self):
        assert str(self.writer.resolve_path("gif", output="/tmp/x")) == "/tmp/x.gif"

    def test_existing_extension_kept(self):
        assert str(self.writer.resolve_path("png", output="photo.jpeg")) == "/work/photo.jpeg"

    def test_output_dir_takes_file_name(self):
        path = self.writer.resolve_path("png", output="sub/name", output_dir="/out")
        assert str(path) == "/out/name.png"

    def test_output_dir_default_name(self):
        assert str(self.writer.resolve_path("bmp", output_dir="/out")) == "/out/image_1700000000500.bmp"

    def test_relative_output_dir(self):
        assert str(self.writer.resolve_path("png", output_dir="out")) == "/work/out/image_1700000000500.png"

    def test_batch_index_with_output(self):
        path = self.writer.resolve_path("gif", output="out.png", index=2)
        assert str(path) == "/work/out_2.gif"

    def test_batch_index_default_name(self):
        path = self.writer.resolve_path("webp", index=3, output_dir="/out")
        assert str(path) == "/out/image_1700000000500_3.webp"


class TestWrite:
    def test_creates_parent_directories(self, tmp_path):
        target = tmp_path / "a" / "b" / "image.png"
        written = ImageWriter.write(b"\x89PNG", target)
        assert written == target
        assert target.read_bytes() == b"\x89PNG"

    def test_overwrites_existing_file(self, tmp_path):
        target = tmp_path / "image.png"
        target.write_bytes(b"old")
        ImageWriter.write(b"new", target)
        assert target.read_bytes() == b"new"

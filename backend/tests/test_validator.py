"""Tests for the client-side image validator."""
from alttext.client.validator import UploadCandidate, guess_media_type, validate_candidates

MB = 1024 * 1024


def candidate(name, media_type, size):
    return UploadCandidate(filename=name, media_type=media_type, size=size, data=b"x")


class TestValidateCandidates:

    def test_unsupported_type_rejected_siblings_kept(self):
        batch = [
            candidate("a.jpg", "image/jpeg", 1000),
            candidate("doc.pdf", "application/pdf", 1000),
            candidate("b.webp", "image/webp", 1000),
            candidate("anim.gif", "image/gif", 1000),
        ]
        result = validate_candidates(batch)

        assert [c.filename for c in result.valid] == ["a.jpg", "b.webp"]
        assert [c.filename for c in result.rejected] == ["doc.pdf", "anim.gif"]
        assert result.errors == [
            "doc.pdf is not a supported image format (.jpg, .jpeg, .png, .webp).",
            "anim.gif is not a supported image format (.jpg, .jpeg, .png, .webp).",
        ]

    def test_oversized_file_gets_size_message(self):
        result = validate_candidates([candidate("big.png", "image/png", 6 * MB)])

        assert result.valid == []
        assert result.errors == ["big.png exceeds 5 MB. Please upload images up to 5 MB."]

    def test_exactly_five_mib_is_accepted(self):
        result = validate_candidates([candidate("edge.jpg", "image/jpg", 5 * MB)])
        assert len(result.valid) == 1
        assert result.errors == []

    def test_type_checked_before_size(self):
        result = validate_candidates([candidate("huge.tiff", "image/tiff", 50 * MB)])
        assert result.errors == ["huge.tiff is not a supported image format (.jpg, .jpeg, .png, .webp)."]

    def test_jpeg_and_oversized_png(self):
        result = validate_candidates([
            candidate("photo.jpg", "image/jpeg", 2 * MB),
            candidate("poster.png", "image/png", 6 * MB),
        ])
        assert [c.filename for c in result.valid] == ["photo.jpg"]
        assert len(result.errors) == 1
        assert "poster.png exceeds 5 MB" in result.errors[0]

    def test_empty_batch(self):
        result = validate_candidates([])
        assert (result.valid, result.rejected, result.errors) == ([], [], [])


class TestUploadCandidate:

    def test_from_path(self, tmp_path):
        p = tmp_path / "Cat.WEBP"
        p.write_bytes(b"\x00" * 42)

        c = UploadCandidate.from_path(p)

        assert c.filename == "Cat.WEBP"
        assert c.media_type == "image/webp"
        assert c.size == 42
        assert c.data == b"\x00" * 42

    def test_guess_media_type(self):
        assert guess_media_type("x.jpeg") == "image/jpeg"
        assert guess_media_type("x.png") == "image/png"
        assert guess_media_type("x.unknownext") == "application/octet-stream"

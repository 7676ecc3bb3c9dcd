"""Tests for the top-level embed builder."""

import logging
from datetime import UTC, datetime

import pytest

from embedcraft import (
    AuthorBuilder,
    BuilderConsumedError,
    EmbedBuilder,
    EmbedDocument,
    EmbedValidationError,
    ErrorKind,
    FieldBuilder,
    FooterBuilder,
    ImageSource,
    colors,
)
from embedcraft.config import Settings
from embedcraft.models import FieldData


def full_builder() -> EmbedBuilder:
    """A builder with every part set."""
    return (
        EmbedBuilder()
        .title("Release notes")
        .description("What changed this week")
        .url("https://example.com/releases")
        .color(colors.BLURPLE)
        .timestamp("2024-01-02T03:04:05+00:00")
        .footer(FooterBuilder("page 1").icon(ImageSource.url("https://example.com/f.png")))
        .image(ImageSource.attachment("chart.png"))
        .thumbnail(ImageSource.url("https://example.com/t.png"))
        .author(AuthorBuilder("release bot").url("https://example.com"))
        .field(FieldBuilder("Version", "1.4.0").inline())
        .field(FieldBuilder("Notes", "Faster builds"))
    )


class TestBuild:
    def test_empty(self):
        document = EmbedBuilder().build()
        assert document == EmbedDocument()
        assert document.fields == ()

    def test_all_parts(self):
        document = full_builder().build()
        assert document.title == "Release notes"
        assert document.description == "What changed this week"
        assert document.url == "https://example.com/releases"
        assert document.color == colors.BLURPLE
        assert document.timestamp == "2024-01-02T03:04:05+00:00"
        assert document.footer is not None
        assert document.footer.text == "page 1"
        assert document.image == ImageSource.attachment("chart.png")
        assert document.thumbnail == ImageSource.url("https://example.com/t.png")
        assert document.author is not None
        assert document.author.url == "https://example.com"
        assert document.fields == (
            FieldData(name="Version", value="1.4.0", inline=True),
            FieldData(name="Notes", value="Faster builds"),
        )

    def test_last_write_wins(self):
        document = (
            EmbedBuilder()
            .title("first")
            .title("second")
            .color(0x111111)
            .color(0x222222)
            .image(ImageSource.attachment("a.png"))
            .image(ImageSource.attachment("b.png"))
            .build()
        )
        assert document.title == "second"
        assert document.color == 0x222222
        assert document.image == ImageSource.attachment("b.png")

    def test_accepts_built_parts(self):
        footer = FooterBuilder("page 1").build()
        author = AuthorBuilder("bot").build()
        field = FieldBuilder("a", "b").build()
        document = EmbedBuilder().footer(footer).author(author).field(field).build()
        assert document.footer == footer
        assert document.author == author
        assert document.fields == (field,)

    def test_logs_on_success(self, caplog: pytest.LogCaptureFixture):
        caplog.set_level(logging.DEBUG, logger="embedcraft.builders.embed")
        EmbedBuilder().title("hello").field(FieldBuilder("a", "b")).build()
        assert "embed_built fields=1 total_length=7" in caplog.messages

    def test_failure_not_logged(self, caplog: pytest.LogCaptureFixture):
        caplog.set_level(logging.DEBUG, logger="embedcraft.builders.embed")
        with pytest.raises(EmbedValidationError):
            EmbedBuilder().title("")
        assert caplog.messages == []


class TestTextSetters:
    def test_title_at_limit(self):
        assert EmbedBuilder().title("a" * 256).build().title == "a" * 256

    def test_title_too_long(self):
        with pytest.raises(EmbedValidationError) as exc:
            EmbedBuilder().title("a" * 257)
        assert exc.value.kind is ErrorKind.TITLE_TOO_LONG
        assert exc.value.field == "title"

    def test_title_empty(self):
        with pytest.raises(EmbedValidationError) as exc:
            EmbedBuilder().title("")
        assert exc.value.kind is ErrorKind.TITLE_EMPTY

    def test_description_at_limit(self):
        assert len(EmbedBuilder().description("a" * 4096).build().description) == 4096

    def test_description_too_long(self):
        with pytest.raises(EmbedValidationError) as exc:
            EmbedBuilder().description("a" * 4097)
        assert exc.value.kind is ErrorKind.DESCRIPTION_TOO_LONG
        assert exc.value.length == 4097

    def test_description_empty(self):
        with pytest.raises(EmbedValidationError) as exc:
            EmbedBuilder().description("")
        assert exc.value.kind is ErrorKind.DESCRIPTION_EMPTY

    def test_unencodable_title(self):
        builder = EmbedBuilder().title("kept")
        with pytest.raises(EmbedValidationError) as exc:
            builder.title("\ud800")
        assert exc.value.kind is ErrorKind.INVALID_TEXT
        assert exc.value.field == "title"
        assert builder.build().title == "kept"

    def test_unencodable_description(self):
        with pytest.raises(EmbedValidationError) as exc:
            EmbedBuilder().description("ok \udc00")
        assert exc.value.kind is ErrorKind.INVALID_TEXT

    def test_failed_setter_keeps_previous_value(self):
        builder = EmbedBuilder().title("kept").description("kept too")
        with pytest.raises(EmbedValidationError):
            builder.title("a" * 257)
        with pytest.raises(EmbedValidationError):
            builder.description("")
        document = builder.build()
        assert document.title == "kept"
        assert document.description == "kept too"


class TestUrl:
    def test_valid(self):
        assert EmbedBuilder().url("https://example.com").build().url == "https://example.com"

    def test_non_http_scheme_with_host(self):
        assert EmbedBuilder().url("ftp://example.com/a").build().url == "ftp://example.com/a"

    @pytest.mark.parametrize(
        "url",
        [
            "not-a-url",
            "",
            "example.com",
            "mailto:a@b.c",
            " https://example.com/x.png ",
            "https://example.com/a b.png",
            "https://example.com/\n.png",
            "https://example.com/\x7f",
        ],
    )
    def test_invalid(self, url: str):
        builder = EmbedBuilder()
        with pytest.raises(EmbedValidationError) as exc:
            builder.url(url)
        assert exc.value.kind is ErrorKind.INVALID_URL
        assert builder.build().url is None


class TestColor:
    def test_maximum(self):
        assert EmbedBuilder().color(0xFFFFFF).build().color == 0xFFFFFF

    def test_zero(self):
        assert EmbedBuilder().color(0).build().color == 0

    @pytest.mark.parametrize("color", [0x1000000, -1])
    def test_out_of_range(self, color: int):
        with pytest.raises(EmbedValidationError) as exc:
            EmbedBuilder().color(color)
        assert exc.value.kind is ErrorKind.COLOR_OUT_OF_RANGE
        assert exc.value.value == color
        assert exc.value.limit == 0xFFFFFF

    def test_bool_rejected(self):
        with pytest.raises(EmbedValidationError):
            EmbedBuilder().color(True)

    def test_failed_color_keeps_previous(self):
        builder = EmbedBuilder().color(colors.RED)
        with pytest.raises(EmbedValidationError):
            builder.color(0x1000000)
        assert builder.build().color == colors.RED

    def test_palette_in_range(self):
        for value in colors.PALETTE.values():
            EmbedBuilder().color(value)


class TestTimestamp:
    def test_datetime(self):
        when = datetime(2024, 1, 2, 3, 4, 5, tzinfo=UTC)
        document = EmbedBuilder().timestamp(when).build()
        assert document.timestamp == "2024-01-02T03:04:05+00:00"

    def test_string_kept_as_given(self):
        document = EmbedBuilder().timestamp("2024-01-02T03:04:05Z").build()
        assert document.timestamp == "2024-01-02T03:04:05Z"

    @pytest.mark.parametrize("value", ["yesterday", "", "2024-13-01T00:00:00"])
    def test_invalid(self, value: str):
        with pytest.raises(EmbedValidationError) as exc:
            EmbedBuilder().timestamp(value)
        assert exc.value.kind is ErrorKind.INVALID_TIMESTAMP


class TestFields:
    def test_order_preserved(self):
        document = (
            EmbedBuilder()
            .field(FieldBuilder("1", "a"))
            .field(FieldBuilder("2", "b"))
            .field(FieldBuilder("3", "c"))
            .build()
        )
        assert [f.name for f in document.fields] == ["1", "2", "3"]

    def test_twenty_five_fields(self):
        builder = EmbedBuilder()
        for i in range(25):
            builder.field(FieldBuilder(f"f{i}", "v"))
        assert len(builder.build().fields) == 25

    def test_twenty_sixth_field(self):
        builder = EmbedBuilder()
        for i in range(25):
            builder.field(FieldBuilder(f"f{i}", "v"))
        with pytest.raises(EmbedValidationError) as exc:
            builder.field(FieldBuilder("f25", "v"))
        assert exc.value.kind is ErrorKind.TOO_MANY_FIELDS
        assert exc.value.length == 26
        assert exc.value.limit == 25
        assert len(builder.build().fields) == 25

    def test_batch_is_atomic(self):
        builder = EmbedBuilder().fields(FieldBuilder(f"f{i}", "v") for i in range(24))
        with pytest.raises(EmbedValidationError) as exc:
            builder.fields([FieldBuilder("x", "v"), FieldBuilder("y", "v")])
        assert exc.value.length == 26
        assert len(builder.build().fields) == 24

    def test_rejects_other_types(self):
        builder = EmbedBuilder().field(FieldBuilder("a", "b"))
        with pytest.raises(TypeError):
            builder.fields("ab")
        with pytest.raises(TypeError):
            builder.fields([FieldBuilder("c", "d"), {"name": "e", "value": "f"}])
        assert [f.name for f in builder.build().fields] == ["a"]

    def test_batch(self):
        document = EmbedBuilder().fields([FieldBuilder("a", "1"), FieldBuilder("b", "2")]).build()
        assert [f.value for f in document.fields] == ["1", "2"]


class TestEmbedBudget:
    def test_exactly_at_limit(self):
        builder = EmbedBuilder().description("d" * 4096).title("t" * 256).footer(
            FooterBuilder("f" * 1648)
        )
        assert builder.total_length() == 6000
        assert builder.build().total_length() == 6000

    def test_one_over_limit(self):
        builder = EmbedBuilder().description("d" * 4096).title("t" * 256).footer(
            FooterBuilder("f" * 1649)
        )
        with pytest.raises(EmbedValidationError) as exc:
            builder.build()
        assert exc.value.kind is ErrorKind.EMBED_TOO_LARGE
        assert exc.value.length == 6001
        assert exc.value.limit == 6000

    def test_max_parts_trip_budget(self, max_field: FieldData):
        builder = (
            EmbedBuilder()
            .description("d" * 4096)
            .title("t" * 256)
            .field(max_field)
            .field(max_field)
        )
        with pytest.raises(EmbedValidationError) as exc:
            builder.build()
        assert exc.value.kind is ErrorKind.EMBED_TOO_LARGE
        assert exc.value.length == 4096 + 256 + 2 * (256 + 1024)

    def test_author_name_counts(self):
        builder = EmbedBuilder().description("d" * 4096).footer(FooterBuilder("f" * 1900))
        builder.author(AuthorBuilder("a" * 5))
        assert builder.total_length() == 6001
        with pytest.raises(EmbedValidationError):
            builder.build()

    def test_urls_do_not_count(self):
        builder = EmbedBuilder().title("abc").url("https://example.com/" + "x" * 7000)
        assert builder.total_length() == 3

    def test_builder_usable_after_budget_failure(self, max_field: FieldData):
        builder = (
            EmbedBuilder()
            .description("d" * 4096)
            .title("t" * 256)
            .field(max_field)
            .field(max_field)
        )
        with pytest.raises(EmbedValidationError):
            builder.build()
        document = builder.description("short").build()
        assert document.total_length() == 5 + 256 + 2 * (256 + 1024)


class TestLifecycle:
    def test_setters_after_build(self):
        builder = EmbedBuilder().title("done")
        builder.build()
        with pytest.raises(BuilderConsumedError):
            builder.title("again")
        with pytest.raises(BuilderConsumedError):
            builder.field(FieldBuilder("a", "b"))

    def test_build_twice(self):
        builder = EmbedBuilder()
        builder.build()
        with pytest.raises(BuilderConsumedError):
            builder.build()

    def test_copy_builds_identical_documents(self):
        builder = full_builder()
        clone = builder.copy()
        assert clone.build() == builder.build()

    def test_copy_is_independent(self):
        builder = EmbedBuilder().field(FieldBuilder("a", "b"))
        clone = builder.copy().field(FieldBuilder("c", "d")).title("clone")
        document = builder.build()
        assert len(document.fields) == 1
        assert document.title is None
        assert len(clone.build().fields) == 2

    def test_equivalent_state_builds_equal_documents(self):
        assert full_builder().build() == full_builder().build()


class TestFromSettings:
    def test_default_color_applied(self):
        settings = Settings(embedcraft_default_color=0x123456)
        assert EmbedBuilder.from_settings(settings).build().color == 0x123456

    def test_default_color_can_be_overridden(self):
        settings = Settings(embedcraft_default_color=0x123456)
        document = EmbedBuilder.from_settings(settings).color(colors.GREEN).build()
        assert document.color == colors.GREEN

    def test_no_default(self, settings: Settings):
        assert EmbedBuilder.from_settings(settings).build().color is None

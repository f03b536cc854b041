"""
Tests for embed records and their conversion to Discord's shapes.
"""

from datetime import datetime, timezone

import discord

from embedkit.embed_author import EmbedAuthorBuilder
from embedkit.embed_builder import EmbedBuilder
from embedkit.embed_field import EmbedFieldBuilder
from embedkit.embed_footer import EmbedFooterBuilder
from embedkit.embed_models import Embed, EmbedAuthor
from embedkit.image_source import ImageSource


class TestToDict:
    """Tests for rendering records to Discord JSON."""

    def test_author_omits_absent_fields(self):
        """Test that unset author attributes are left out."""
        assert EmbedAuthor().to_dict() == {}
        assert EmbedAuthor(name="an author").to_dict() == {"name": "an author"}

    def test_author_round_trip_shape(self):
        """Test the JSON shape of a fully configured author."""
        author = (
            EmbedAuthorBuilder()
            .set_icon(ImageSource.from_url("https://example.com/1.png"))
            .set_name("an author")
            .set_url("https://example.com")
            .build()
        )
        assert author.to_dict() == {
            "name": "an author",
            "url": "https://example.com",
            "icon_url": "https://example.com/1.png",
        }

    def test_empty_embed(self):
        """Test that an empty embed only carries its type."""
        assert Embed().to_dict() == {"type": "rich"}

    def test_embed(self):
        """Test the JSON shape of a populated embed."""
        timestamp = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)
        embed = (
            EmbedBuilder(title="Title", color=0xABCDEF)
            .set_timestamp(timestamp)
            .set_footer(EmbedFooterBuilder("footer"))
            .add_field(EmbedFieldBuilder("n", "v").inline())
            .set_image(ImageSource.from_url("https://example.com/i.png"))
            .build()
        )
        assert embed.to_dict() == {
            "type": "rich",
            "title": "Title",
            "timestamp": "2024-01-01T12:00:00+00:00",
            "color": 0xABCDEF,
            "footer": {"text": "footer"},
            "image": {"url": "https://example.com/i.png"},
            "fields": [{"name": "n", "value": "v", "inline": True}],
        }


class TestToDiscord:
    """Tests for converting to discord.py embeds."""

    def test_to_discord(self):
        """Test that every populated part survives the conversion."""
        timestamp = datetime(2024, 1, 1, tzinfo=timezone.utc)
        embed = (
            EmbedBuilder(title="Title", description="Body", color=0x00FF00)
            .set_timestamp(timestamp)
            .set_author(
                EmbedAuthorBuilder()
                .set_name("an author")
                .set_url("https://example.com")
                .set_icon(ImageSource.from_url("https://example.com/1.png"))
            )
            .set_footer(EmbedFooterBuilder("footer"))
            .add_field(EmbedFieldBuilder("n", "v"))
            .set_thumbnail(ImageSource.from_url("https://example.com/t.png"))
            .build()
        )

        discord_embed = embed.to_discord()

        assert isinstance(discord_embed, discord.Embed)
        assert discord_embed.title == "Title"
        assert discord_embed.description == "Body"
        assert discord_embed.colour.value == 0x00FF00
        assert discord_embed.timestamp == timestamp
        assert discord_embed.author.name == "an author"
        assert discord_embed.author.url == "https://example.com"
        assert discord_embed.author.icon_url == "https://example.com/1.png"
        assert discord_embed.footer.text == "footer"
        assert discord_embed.fields[0].name == "n"
        assert discord_embed.fields[0].value == "v"
        assert discord_embed.fields[0].inline is False
        assert discord_embed.thumbnail.url == "https://example.com/t.png"

    def test_records_are_hashable(self):
        """Test that built records can be shared as dictionary keys."""
        author = EmbedAuthorBuilder().set_name("name").build()
        assert {author: 1}[EmbedAuthor(name="name")] == 1

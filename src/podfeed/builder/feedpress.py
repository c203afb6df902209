"""Builder for the Feedpress extension block."""

from podfeed.builder.base import Builder, any_present
from podfeed.model.feedpress import Feedpress


class FeedpressBuilder(Builder[Feedpress]):
    """Builds Feedpress blocks; ready as soon as any field is set."""

    def __init__(self) -> None:
        self._newsletter_id: str | None = None
        self._locale: str | None = None
        self._podcast_id: str | None = None
        self._css_file: str | None = None
        self._link: str | None = None

    def newsletter_id(self, newsletter_id: str | None) -> "FeedpressBuilder":
        self._newsletter_id = newsletter_id
        return self

    def locale(self, locale: str | None) -> "FeedpressBuilder":
        self._locale = locale
        return self

    def podcast_id(self, podcast_id: str | None) -> "FeedpressBuilder":
        self._podcast_id = podcast_id
        return self

    def css_file(self, css_file: str | None) -> "FeedpressBuilder":
        self._css_file = css_file
        return self

    def link(self, link: str | None) -> "FeedpressBuilder":
        self._link = link
        return self

    @property
    def has_enough_data_to_build(self) -> bool:
        return any_present(
            self._newsletter_id, self._locale, self._podcast_id, self._css_file, self._link
        )

    def build(self) -> Feedpress | None:
        if not self.has_enough_data_to_build:
            return None
        return Feedpress(
            newsletter_id=self._newsletter_id,
            locale=self._locale,
            podcast_id=self._podcast_id,
            css_file=self._css_file,
            link=self._link,
        )

    def from_model(self, model: Feedpress | None) -> "FeedpressBuilder":
        if model is None:
            return self
        return (
            self.newsletter_id(model.newsletter_id)
            .locale(model.locale)
            .podcast_id(model.podcast_id)
            .css_file(model.css_file)
            .link(model.link)
        )

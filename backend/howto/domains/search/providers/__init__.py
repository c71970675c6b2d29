from .base import (
    ArticleSearchProvider,
    BaseProvider,
    CompletionProvider,
    ProviderName,
    VideoSearchProvider,
)
from .google_provider import GoogleArticleProvider, extract_website
from .openai_provider import OpenAICompletionProvider
from .youtube_provider import YouTubeVideoProvider

__all__ = [
    "ArticleSearchProvider",
    "BaseProvider",
    "CompletionProvider",
    "ProviderName",
    "VideoSearchProvider",
    "GoogleArticleProvider",
    "extract_website",
    "OpenAICompletionProvider",
    "YouTubeVideoProvider",
]

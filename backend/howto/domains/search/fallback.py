"""
Deterministic placeholder results, used when a provider returns nothing.

Everything here is derived from the query string alone so the same query
always yields identical records.
"""

from typing import List
from urllib.parse import quote_plus

from .schemas import Article, Video

FALLBACK_COUNT = 5
FALLBACK_THUMBNAIL = "https://via.placeholder.com/120x90"

_VIDEO_TEMPLATES = [
    ("How to {q} - Complete Beginner's Guide", "DIY Basics", "10:24", "1.2M"),
    ("{Q}: Step-by-Step Tutorial", "Skill Builder", "8:15", "845K"),
    ("Easy Way to {q} (Anyone Can Do This)", "Quick Tips", "5:42", "2.3M"),
    ("{Q} - Common Mistakes to Avoid", "Pro Tutorials", "12:08", "410K"),
    ("Learn to {q} in Under 10 Minutes", "Learn Fast", "9:31", "680K"),
]

_ARTICLE_TEMPLATES = [
    (
        "How to {q}: A Step-by-Step Guide",
        "www.wikihow.com",
        "https://www.wikihow.com/wikiHowTo?search={qs}",
        "Learn how to {q} with clear, illustrated instructions for beginners.",
    ),
    (
        "The Complete Guide to {q}",
        "www.instructables.com",
        "https://www.instructables.com/search/?q={qs}",
        "Everything you need to know to {q}, including tools and tips.",
    ),
    (
        "{Q}: Tips from the Experts",
        "www.reddit.com",
        "https://www.reddit.com/search/?q={qs}",
        "Community-tested advice on how to {q} the right way.",
    ),
    (
        "Beginner's Tutorial: {q}",
        "www.youtube.com",
        "https://www.youtube.com/results?search_query={qs}",
        "A beginner-friendly walkthrough showing how to {q}.",
    ),
    (
        "{Q} Explained",
        "www.google.com",
        "https://www.google.com/search?q={qs}",
        "Find more resources and answers about how to {q}.",
    ),
]


def _fields(query: str) -> dict:
    q = query.strip()
    if q.lower().startswith("how to "):
        q = q[len("how to "):].strip()
    return {
        "q": q,
        "Q": q[:1].upper() + q[1:],
        "qs": quote_plus(q),
    }


def mock_videos(query: str) -> List[Video]:
    """Five placeholder videos for *query*."""
    fields = _fields(query)
    search_url = f"https://www.youtube.com/results?search_query={fields['qs']}"
    return [
        Video(
            id=f"fallback-video-{i}",
            title=title.format(**fields),
            channel=channel,
            duration=duration,
            views=views,
            thumbnail=FALLBACK_THUMBNAIL,
            url=search_url,
        )
        for i, (title, channel, duration, views) in enumerate(_VIDEO_TEMPLATES, 1)
    ]


def mock_articles(query: str) -> List[Article]:
    """Five placeholder articles for *query*."""
    fields = _fields(query)
    return [
        Article(
            id=f"fallback-article-{i}",
            title=title.format(**fields),
            website=website,
            snippet=snippet.format(**fields),
            url=url.format(**fields),
        )
        for i, (title, website, url, snippet) in enumerate(_ARTICLE_TEMPLATES, 1)
    ]

"""Render extraction results as text blocks for tool responses."""

from __future__ import annotations

from mcp_server_scraper.models import BatchResult, PageLink, PageMetadata, ScrapedContent

NONE_PLACEHOLDER = "(none)"


def or_placeholder(value: str, placeholder: str = NONE_PLACEHOLDER) -> str:
    """Return ``value``, or ``placeholder`` when it is empty."""
    return value if value else placeholder


def render_article(content: ScrapedContent) -> str:
    lines = [f"# {content.title}"]
    if content.byline:
        lines.append(f"*{content.byline}*")
    if content.site_name:
        lines.append(f"*{content.site_name}*")
    lines.append("")
    if content.excerpt:
        lines.append(f"> {content.excerpt}")
        lines.append("")
    lines.extend(["---", "", content.content, "", f"_({content.length} characters)_"])
    return "\n".join(lines)


def render_links(links: list[PageLink]) -> str:
    if not links:
        return "No links found."
    return "\n".join(
        f"{i}. [{or_placeholder(link.text, link.href)}]({link.href})"
        for i, link in enumerate(links, start=1)
    )


def render_metadata(meta: PageMetadata) -> str:
    fields = [
        ("Title", meta.title),
        ("Description", meta.description),
        ("og:title", meta.og_title),
        ("og:description", meta.og_description),
        ("og:image", meta.og_image),
        ("Canonical", meta.canonical),
        ("Favicon", meta.favicon),
    ]
    return "\n".join(f"**{label}:** {or_placeholder(value)}" for label, value in fields)


def render_search_results(lines: list[str], query: str) -> str:
    if not lines:
        return f'No lines containing "{query}" found.'
    return "\n".join(f"{i}. {line}" for i, line in enumerate(lines, start=1))


def render_batch(results: list[BatchResult]) -> str:
    if not results:
        return "No URLs provided."

    entries = []
    for i, result in enumerate(results, start=1):
        if not result.success:
            entries.append(f"{i}. **{result.url}** - Error: {result.error}")
            continue
        title = or_placeholder(result.title, "(no title)")
        excerpt = or_placeholder(result.excerpt, "(no excerpt)")
        entries.append(f"{i}. **{title}** - {excerpt}\n   {result.url}")
    return "\n\n".join(entries)

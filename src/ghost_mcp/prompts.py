"""MCP prompts for Ghost editorial workflows."""

# pyright: reportUnusedFunction=false

from fastmcp import FastMCP


def register(app: FastMCP) -> None:
    """Register prompts on the provided app instance."""

    @app.prompt(
        name="Summarize Recent Posts",
        description="Create a prompt to summarize the most recently published posts.",
        tags={"summary", "posts"},
    )
    def summarize_recent_posts(count: int = 5) -> str:
        return (
            f"Please summarize the {count} most recently published posts on this Ghost site. "
            f"Use the content_browse_posts tool with limit={count} and order='published_at DESC', "
            "and include tags and authors. For each post give the title, publish date, and a one-sentence summary."
        )

    @app.prompt(
        name="Draft Post",
        description="Create a prompt to draft a new post and save it as a Ghost draft.",
        tags={"writing", "posts"},
    )
    def draft_post(topic: str, tags: str = "") -> str:
        prompt = f"Please write a blog post about '{topic}'."
        if tags:
            prompt += f" Tag it with: {tags}."
        prompt += (
            " Save it with the admin_create_post tool using status 'draft' and HTML content, "
            "then report the new post's ID and slug."
        )
        return prompt

    @app.prompt(
        name="Review Post SEO",
        description="Review a post's SEO metadata and suggest improvements.",
        tags={"seo", "posts"},
    )
    def review_post_seo(slug: str) -> str:
        return (
            f"Please review the SEO metadata of the post with slug '{slug}'. "
            "Use the admin_read_post tool to fetch it, then check meta_title, meta_description, "
            "og_* and twitter_* fields, the custom excerpt, and the feature image. "
            "Suggest concrete improvements; do not change the post."
        )


__all__ = ["register"]

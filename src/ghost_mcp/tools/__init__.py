"""Tools package for MCP server.

Contains MCP tool registration modules:
- ``content``: Browse/read posts, pages, tags and authors (Content API)
- ``admin_posts``: Browse, read, create, update, delete and copy posts (Admin API)
- ``admin_tags``: Browse, read, create, update and delete tags (Admin API)
- ``admin_images``: Upload images (Admin API, multipart)
- ``admin_site``: Read site information and settings (Admin API)
- ``common``: Shared parameter types and error handling for tools
"""

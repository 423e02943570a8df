"""
Reusable UI components for the Streamlit app.
"""

import os
import streamlit as st
from typing import Dict, Any, List, Optional


def default_api_url() -> str:
    """API URL passed in by the launcher, or the local default."""
    return os.getenv("API_URL", "http://localhost:8000")


def header(name: str = "Portfolio"):
    """Display the application header."""
    st.set_page_config(
        page_title=name,
        page_icon="💼",
        layout="wide",
        initial_sidebar_state="expanded",
    )


def sidebar() -> str:
    """
    Display the sidebar navigation and settings.

    Returns:
        The selected page
    """
    with st.sidebar:
        st.title("Navigation")
        page = st.radio("Go to", ["Home", "Blog", "Admin"], key="nav_page")

        st.markdown("## Settings")
        st.text_input("API URL", value=default_api_url(), key="api_url")

    return page


def portfolio_page(portfolio: Dict[str, Any]):
    """Render the portfolio sections."""
    info = portfolio["personal_info"]
    st.title(info["name"])
    st.subheader(info["tagline"])
    st.markdown(info["description"])

    st.markdown("## About")
    st.markdown(portfolio["about"]["bio"])
    for highlight in portfolio["about"]["highlights"]:
        st.markdown(f"- {highlight}")

    st.markdown("## Skills")
    columns = st.columns(3)
    for i, (category, items) in enumerate(portfolio["skills"].items()):
        with columns[i % 3]:
            st.markdown(f"**{category}**")
            st.markdown(", ".join(items))

    st.markdown("## Projects")
    for project in portfolio["projects"]:
        with st.expander(f"{project['title']} · {project['category']}"):
            st.markdown(project["description"])
            st.markdown(f"**Impact:** {project['impact']}")
            st.caption(" · ".join(project["tech"]))

    st.markdown("## Experience")
    for role in portfolio["experience"]:
        st.markdown(f"**{role['title']}**, {role['company']} ({role['period']})")
        for achievement in role["achievements"]:
            st.markdown(f"- {achievement}")

    education = portfolio["education"]
    st.markdown("## Education")
    st.markdown(f"**{education['degree']}**, {education['institution']} ({education['period']}), CGPA {education['cgpa']}")

    st.markdown("## Contact")
    st.markdown(
        f"[Email](mailto:{info['email']}) · [LinkedIn]({info['linkedin']}) · [GitHub]({info['github']}) · {info['location']}"
    )


def blog_card(blog: Dict[str, Any]) -> bool:
    """
    Display a blog summary card.

    Returns:
        True if the reader clicked "Read more"
    """
    with st.container(border=True):
        if blog.get("cover_image"):
            st.image(blog["cover_image"], use_container_width=True)
        st.markdown(f"### {blog['title']}")
        st.caption(format_date(blog["created_at"]))
        if blog.get("excerpt"):
            st.markdown(blog["excerpt"])
        return st.button("Read more", key=f"read_{blog['id']}")


def blog_post(blog: Dict[str, Any]):
    """Render a full blog post from its markdown content."""
    if blog.get("cover_image"):
        st.image(blog["cover_image"], use_container_width=True)
    st.title(blog["title"])
    st.caption(format_date(blog["created_at"]))
    st.markdown(blog["content"])


def blog_form(initial: Optional[Dict[str, Any]] = None, key: str = "blog_form") -> Optional[Dict[str, Any]]:
    """
    Display the blog editor form.

    Args:
        initial: Values to pre-fill (existing post or generated draft)
        key: Form key

    Returns:
        Submitted values or None
    """
    initial = initial or {}
    with st.form(key=key):
        title = st.text_input("Title", value=initial.get("title", ""))
        slug = st.text_input("Slug", value=initial.get("slug", ""))
        excerpt = st.text_area("Excerpt", value=initial.get("excerpt") or "", height=80)
        cover_image = st.text_input("Cover image URL", value=initial.get("cover_image") or "")
        content = st.text_area("Content (Markdown)", value=initial.get("content", ""), height=400)
        published = st.checkbox("Published", value=bool(initial.get("published", False)))
        submit = st.form_submit_button("Save")

    if submit:
        return {
            "title": title,
            "slug": slug,
            "excerpt": excerpt,
            "cover_image": cover_image,
            "content": content,
            "published": published,
        }
    return None


def blog_table(blogs: List[Dict[str, Any]]):
    """Display posts as a compact admin table."""
    st.dataframe(
        [
            {
                "id": blog["id"],
                "title": blog["title"],
                "slug": blog["slug"],
                "published": blog["published"],
                "updated": format_date(blog["updated_at"]),
            }
            for blog in blogs
        ],
        hide_index=True,
        use_container_width=True,
    )


def format_date(value: str) -> str:
    """Format an ISO timestamp as a readable date."""
    return value[:10] if value else ""


def loading_spinner(message: str = "Processing..."):
    """
    Display a loading spinner with a message.

    Args:
        message: Message to display with the spinner
    """
    return st.spinner(message)


def display_error(message: str):
    """
    Display an error message.

    Args:
        message: Error message to display
    """
    st.error(message)


def display_success(message: str):
    """
    Display a success message.

    Args:
        message: Success message to display
    """
    st.success(message)

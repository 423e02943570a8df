"""
Main Streamlit application for the portfolio and blog.
"""

import streamlit as st
from typing import Dict, Any, Optional
from dotenv import load_dotenv
from portfolio.frontend.api_client import ApiClient, ApiError
from portfolio.frontend.components import (
    default_api_url, header, sidebar, portfolio_page, blog_card, blog_post, blog_form,
    blog_table, loading_spinner, display_error, display_success,
)


load_dotenv()


def init_session_state():
    """Initialize session state variables."""
    api_url = st.session_state.get("api_url") or default_api_url()
    client = st.session_state.get("api_client")
    if client is None or client.base_url != api_url:
        token = client.token if client else None
        st.session_state.api_client = ApiClient(api_url, token=token)

    if "current_post" not in st.session_state:
        st.session_state.current_post = None

    if "editing" not in st.session_state:
        st.session_state.editing = None

    if "draft" not in st.session_state:
        st.session_state.draft = None


def home_view():
    """Display the portfolio page."""
    client = st.session_state.api_client
    try:
        portfolio_page(client.get_portfolio())
    except Exception as e:
        display_error(f"Error loading portfolio: {str(e)}")


def blog_view():
    """Display the published posts, or a single post when one is selected."""
    client = st.session_state.api_client

    if st.session_state.current_post:
        if st.button("← All posts"):
            st.session_state.current_post = None
            st.rerun()

        blog = client.get_blog(st.session_state.current_post)
        if not blog:
            display_error("Blog not found")
            return
        blog_post(blog)
        return

    st.title("Blog")
    try:
        blogs = client.list_blogs()
    except Exception as e:
        display_error(f"Error loading blogs: {str(e)}")
        return

    if not blogs:
        st.info("No posts yet.")
        return

    for blog in blogs:
        if blog_card(blog):
            st.session_state.current_post = blog["slug"]
            st.rerun()


def login_view():
    """Display the admin login form."""
    st.title("Admin Login")
    with st.form(key="login_form"):
        password = st.text_input("Password", type="password")
        submit = st.form_submit_button("Log in")

    if submit and password:
        try:
            st.session_state.api_client.login(password)
            st.rerun()
        except ApiError as e:
            display_error(e.detail or "Authentication failed")
        except Exception:
            display_error("An error occurred. Please try again.")


def generate_section():
    """Let the admin draft a post from a YouTube video."""
    client = st.session_state.api_client

    st.markdown("### Generate from YouTube")
    with st.form(key="generate_form"):
        url = st.text_input("YouTube URL", placeholder="https://www.youtube.com/watch?v=VIDEO_ID")
        submit = st.form_submit_button("Generate draft")

    if submit and url:
        try:
            with loading_spinner("Fetching transcript and writing draft. This may take a minute..."):
                st.session_state.draft = client.generate_from_youtube(url)
            display_success("Draft generated. Review it below before saving.")
        except ApiError as e:
            display_error(e.detail)


def upload_section():
    """Upload an image and show the markdown to paste into the post."""
    client = st.session_state.api_client

    uploaded = st.file_uploader("Upload image", type=["png", "jpg", "jpeg", "gif", "webp"])
    if uploaded is not None and st.button("Upload"):
        try:
            with loading_spinner("Uploading image..."):
                result = client.upload_image(uploaded.name, uploaded.getvalue(), uploaded.type)
            display_success("Image uploaded.")
            st.code(f"![{uploaded.name}]({result['url']})", language="markdown")
        except ApiError as e:
            display_error(e.detail)


def editor_view(blog: Optional[Dict[str, Any]] = None):
    """Create a new post, or edit an existing one."""
    client = st.session_state.api_client

    if st.button("← Back to dashboard"):
        st.session_state.editing = None
        st.session_state.draft = None
        st.rerun()

    if blog is None:
        st.markdown("## New Post")
        generate_section()
        initial = st.session_state.draft
    else:
        st.markdown(f"## Edit: {blog['title']}")
        initial = blog

    upload_section()

    values = blog_form(initial, key=f"blog_form_{blog['id'] if blog else 'new'}")
    if values is None:
        return

    try:
        if blog is None:
            client.create_blog(values)
        else:
            client.update_blog(blog["id"], values)
    except ApiError as e:
        display_error(e.detail)
        return

    st.session_state.editing = None
    st.session_state.draft = None
    st.rerun()


def dashboard_view():
    """List every post with publish and delete actions."""
    client = st.session_state.api_client

    col1, col2 = st.columns([6, 1])
    with col1:
        st.title("Blog Dashboard")
    with col2:
        if st.button("Log out"):
            client.logout()
            st.rerun()

    if st.button("+ New post"):
        st.session_state.editing = "new"
        st.rerun()

    blogs = client.list_blogs(include_drafts=True)
    if not blogs:
        st.info("No posts yet.")
        return

    blog_table(blogs)

    for blog in blogs:
        col1, col2, col3, col4 = st.columns([5, 1, 1, 1])
        with col1:
            st.markdown(f"**{blog['title']}**  `{blog['slug']}`")
        with col2:
            label = "Unpublish" if blog["published"] else "Publish"
            if st.button(label, key=f"publish_{blog['id']}"):
                client.update_blog(blog["id"], {"published": not blog["published"]})
                st.rerun()
        with col3:
            if st.button("Edit", key=f"edit_{blog['id']}"):
                st.session_state.editing = blog["id"]
                st.rerun()
        with col4:
            if st.button("Delete", key=f"delete_{blog['id']}"):
                client.delete_blog(blog["id"])
                st.rerun()


def admin_view():
    """Route between login, dashboard and editor."""
    client = st.session_state.api_client
    if not client.verify():
        login_view()
        return

    editing = st.session_state.editing
    try:
        if editing == "new":
            editor_view()
        elif editing is not None:
            blog = client.get_blog(editing)
            if not blog:
                st.session_state.editing = None
                st.rerun()
            editor_view(blog)
        else:
            dashboard_view()
    except ApiError as e:
        display_error(e.detail)


def main():
    """Main application entry point."""
    header()
    page = sidebar()
    init_session_state()

    if page == "Blog":
        blog_view()
    elif page == "Admin":
        admin_view()
    else:
        home_view()


if __name__ == "__main__":
    main()

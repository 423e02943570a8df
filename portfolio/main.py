"""
Main entry point for drafting blog posts from YouTube videos.
"""

import argparse
from pathlib import Path
from typing import Optional

from portfolio.models.schemas import BlogDraft, GenerationConfig
from portfolio.core.youtube import YouTubeTranscriptExtractor
from portfolio.core.generator import BlogGenerator
from portfolio.config import config
from portfolio.utils.error_handling import InvalidVideoURLError, TranscriptUnavailableError
from portfolio.utils.helpers import save_json
from portfolio.utils.logger import logging


def save_draft(draft: BlogDraft, video_id: str, output_file: Optional[str] = None) -> Path:
    """Save a blog draft to a JSON file."""
    if output_file is None:
        output_dir = Path(config.DRAFTS_DIR)
        output_dir.mkdir(parents=True, exist_ok=True)
        output_file = output_dir / f"{video_id}_draft.json"
    else:
        output_file = Path(output_file)

    save_json(draft.model_dump(), str(output_file))

    logging.info(f"Draft saved to: {output_file}")
    return output_file


def generate_blog_from_youtube(url: str, model: Optional[str] = None) -> BlogDraft:
    """
    Process a YouTube video: fetch captions, extract key points, write a draft.

    Args:
        url: YouTube video URL
        model: Optional language model override

    Returns:
        BlogDraft object

    Raises:
        InvalidVideoURLError: If the URL has no video ID
        TranscriptUnavailableError: If no transcript could be fetched
        GenerationError: If the model pipeline fails
    """
    extractor = YouTubeTranscriptExtractor()
    video_id = extractor.extract_video_id(url)
    if not video_id:
        raise InvalidVideoURLError("Invalid YouTube URL")

    # 1. Fetch transcript
    logging.info(f"Fetching transcript for video: {video_id}")
    transcript = extractor.get_video_transcript(video_id)
    if not transcript or not transcript.transcript_text:
        raise TranscriptUnavailableError(
            "Failed to fetch video transcript. The video might not have captions enabled."
        )
    logging.info(f"Transcript fetched. Length: {len(transcript.transcript_text)} characters.")

    # 2. Generate draft
    generation_config = GenerationConfig(model=model) if model else GenerationConfig()
    generator = BlogGenerator(generation_config=generation_config)
    return generator.generate(transcript.transcript_text, video_id)


def create_post_from_draft(draft: BlogDraft) -> int:
    """Store a draft as an unpublished blog post and return its ID."""
    from portfolio.db.crud import create_blog
    from portfolio.db.database import SessionLocal

    db = SessionLocal()
    try:
        blog = create_blog(db, {**draft.model_dump(), "published": False})
        return blog.id
    finally:
        db.close()


def main():
    """Main function to run the application from command line."""
    parser = argparse.ArgumentParser(description="Draft a blog post from a YouTube video")
    parser.add_argument("url", help="YouTube video URL")
    parser.add_argument("--model", default=config.DEFAULT_GENERATION_MODEL,
                        help="Language model used by the extractor and writer agents")
    parser.add_argument("--output", help="Output file path for the draft")
    parser.add_argument("--create-post", action="store_true",
                        help="Also store the draft as an unpublished blog post")

    args = parser.parse_args()

    draft = generate_blog_from_youtube(args.url, args.model)
    video_id = YouTubeTranscriptExtractor().extract_video_id(args.url)
    save_draft(draft, video_id, args.output)

    if args.create_post:
        blog_id = create_post_from_draft(draft)
        print(f"Created unpublished blog post {blog_id}")

    print("\n" + "=" * 80)
    print(draft.title)
    print(f"/{draft.slug}")
    print("=" * 80)
    print(draft.excerpt)
    print("=" * 80)


if __name__ == "__main__":
    main()

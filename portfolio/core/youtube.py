"""
YouTube caption transcript extraction.

Transcripts come from the captions API first. When that fails in development,
yt-dlp is used to locate a caption track which is then downloaded and
flattened to plain text. yt-dlp is not reliable on hosted deployments, so the
fallback is skipped in production.
"""

import json
import re
from typing import Any, Dict, List, Optional
from urllib.parse import urlparse, parse_qs

import requests
import yt_dlp
from youtube_transcript_api import YouTubeTranscriptApi

from portfolio.config import config
from portfolio.models.schemas import TranscriptItem, VideoTranscript
from portfolio.utils.logger import logging

VIDEO_ID_PATTERNS = [
    r"(?:youtube\.com\/watch\?v=|youtu\.be\/)([^&\n?#]+)",
    r"youtube\.com\/embed\/([^&\n?#]+)",
    r"youtube\.com\/v\/([^&\n?#]+)",
]

PLAYLIST_ITEMS_URL = "https://www.googleapis.com/youtube/v3/playlistItems"
WATCH_URL = "https://www.youtube.com/watch?v={video_id}"
PLAYLIST_URL = "https://www.youtube.com/playlist?list={playlist_id}"
REQUEST_TIMEOUT = 20


def captions_to_text(raw: str) -> str:
    """
    Flatten a downloaded caption file to plain text.

    Handles YouTube json3 event dumps, XML caption formats (srv*/ttml) and
    WEBVTT. Anything unrecognised is returned unchanged.

    Args:
        raw: Caption file contents

    Returns:
        Caption text
    """
    try:
        data = json.loads(raw)
    except ValueError:
        data = None

    if data is not None:
        if isinstance(data, dict) and data.get("events"):
            lines = [
                "".join(seg.get("utf8", "") for seg in event["segs"])
                for event in data["events"]
                if event.get("segs")
            ]
            return " ".join(lines).replace("\n", " ")
        return raw

    if "<text" in raw:
        return re.sub(r"\s+", " ", re.sub(r"<[^>]+>", " ", raw)).strip()

    if "WEBVTT" in raw:
        return " ".join(
            line
            for line in raw.split("\n")
            if "-->" not in line and line.strip() != "" and line != "WEBVTT"
        )

    return raw


class YouTubeTranscriptExtractor:
    """Class to handle YouTube caption and playlist lookups."""

    def __init__(self, allow_ytdlp_fallback: Optional[bool] = None, youtube_api_key: Optional[str] = None):
        """
        Initialize the extractor.

        Args:
            allow_ytdlp_fallback: Use yt-dlp when the captions API fails (defaults to development mode)
            youtube_api_key: YouTube Data API key for playlist lookups (defaults to YOUTUBE_API_KEY)
        """
        self.allow_ytdlp_fallback = config.DEBUG if allow_ytdlp_fallback is None else allow_ytdlp_fallback
        self.youtube_api_key = youtube_api_key or config.YOUTUBE_API_KEY

    def extract_video_id(self, url: str) -> Optional[str]:
        """Extract the video ID from a YouTube URL."""
        for pattern in VIDEO_ID_PATTERNS:
            match = re.search(pattern, url)
            if match:
                return match.group(1)
        return None

    def extract_playlist_id(self, url: str) -> Optional[str]:
        """Extract the playlist ID from a YouTube URL."""
        try:
            values = parse_qs(urlparse(url).query).get("list")
        except ValueError:
            return None
        return values[0] if values else None

    def is_playlist(self, url: str) -> bool:
        return "list=" in url

    def get_video_transcript(self, video_id: str) -> Optional[VideoTranscript]:
        """
        Get the caption transcript for a single video.

        Args:
            video_id: YouTube video ID

        Returns:
            VideoTranscript or None if every strategy failed
        """
        try:
            logging.info(f"Fetching transcript for {video_id} using youtube-transcript-api...")
            items = self._fetch_caption_items(video_id)
            if not items:
                raise ValueError("Empty transcript returned")

            logging.info(f"Transcript fetched, {len(items)} caption lines")
            return VideoTranscript(
                video_id=video_id,
                title=f"Video {video_id}",
                transcript_text=" ".join(item.text for item in items),
                duration=sum(item.duration for item in items),
            )
        except Exception as e:
            logging.warning(f"youtube-transcript-api failed for {video_id}: {e}")

        if not self.allow_ytdlp_fallback:
            logging.warning("Skipping yt-dlp fallback in production.")
            return None

        logging.info("Attempting local yt-dlp fallback...")
        text = self._get_transcript_ytdlp(video_id)
        if text:
            return VideoTranscript(
                video_id=video_id,
                title=f"Video {video_id}",
                transcript_text=text,
                duration=0,
            )
        return None

    def _fetch_caption_items(self, video_id: str) -> List[TranscriptItem]:
        """Fetch caption lines from the captions API."""
        fetched = YouTubeTranscriptApi().fetch(video_id)
        return [
            TranscriptItem(text=snippet.text, start=snippet.start, duration=snippet.duration)
            for snippet in fetched.snippets
        ]

    def _get_transcript_ytdlp(self, video_id: str) -> Optional[str]:
        """Fetch a transcript by locating an English caption track with yt-dlp."""
        ydl_opts = {
            "quiet": True,
            "no_warnings": True,
            "skip_download": True,
            "writesubtitles": True,
            "writeautomaticsub": True,
            "nocheckcertificate": True,
        }
        try:
            with yt_dlp.YoutubeDL(ydl_opts) as ydl:
                info = ydl.extract_info(WATCH_URL.format(video_id=video_id), download=False)

            caption_url = self._select_caption_url(info or {})
            if not caption_url:
                logging.warning("No English captions found in yt-dlp output")
                return None

            logging.info(f"Fetching captions from URL: {caption_url}")
            response = requests.get(caption_url, timeout=REQUEST_TIMEOUT)
            response.raise_for_status()

            return captions_to_text(response.text)
        except Exception as e:
            logging.error(f"yt-dlp transcript fetch failed: {e}")
            return None

    @staticmethod
    def _select_caption_url(info: Dict[str, Any]) -> Optional[str]:
        """Prefer manual English subtitles, then automatic ones."""
        subtitles = info.get("subtitles") or {}
        if subtitles.get("en"):
            return subtitles["en"][0].get("url")

        automatic = info.get("automatic_captions") or {}
        tracks = automatic.get("en") or automatic.get("en-orig")
        if tracks:
            return tracks[0].get("url")
        return None

    def get_playlist_videos(self, playlist_url: str) -> List[str]:
        """
        Get all video IDs from a playlist.

        Uses the YouTube Data API when a key is configured, otherwise yt-dlp.

        Args:
            playlist_url: Any YouTube URL carrying a list= parameter

        Returns:
            List of video IDs (empty on failure)
        """
        playlist_id = self.extract_playlist_id(playlist_url)
        if not playlist_id:
            logging.error("Could not extract playlist ID from URL")
            return []

        try:
            if self.youtube_api_key:
                return self._get_playlist_videos_api(playlist_id)
            return self._get_playlist_videos_ytdlp(playlist_id)
        except Exception as e:
            logging.error(f"Error getting playlist videos: {e}")
            return []

    def _get_playlist_videos_api(self, playlist_id: str) -> List[str]:
        """Page through the YouTube Data API, falling back to yt-dlp on error."""
        video_ids = []
        next_page_token = None

        try:
            while True:
                params = {
                    "part": "contentDetails",
                    "playlistId": playlist_id,
                    "maxResults": 50,
                    "key": self.youtube_api_key,
                }
                if next_page_token:
                    params["pageToken"] = next_page_token

                response = requests.get(PLAYLIST_ITEMS_URL, params=params, timeout=REQUEST_TIMEOUT)
                response.raise_for_status()
                data = response.json()

                for item in data.get("items", []):
                    video_ids.append(item["contentDetails"]["videoId"])

                next_page_token = data.get("nextPageToken")
                if not next_page_token:
                    return video_ids
        except (requests.RequestException, KeyError, ValueError) as e:
            logging.error(f"YouTube API error. Falling back to yt-dlp: {e}")
            return self._get_playlist_videos_ytdlp(playlist_id)

    def _get_playlist_videos_ytdlp(self, playlist_id: str) -> List[str]:
        """List playlist entries with a flat yt-dlp extraction."""
        ydl_opts = {
            "quiet": True,
            "no_warnings": True,
            "extract_flat": True,
            "skip_download": True,
            "nocheckcertificate": True,
        }
        try:
            with yt_dlp.YoutubeDL(ydl_opts) as ydl:
                info = ydl.extract_info(PLAYLIST_URL.format(playlist_id=playlist_id), download=False)
        except Exception as e:
            logging.error(f"Error using yt-dlp: {e}")
            return []

        info = info or {}
        if info.get("entries"):
            return [entry["id"] for entry in info["entries"] if entry and entry.get("id")]
        if info.get("id"):
            return [info["id"]]
        return []

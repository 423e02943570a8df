from langchain_core.prompts import ChatPromptTemplate

extractor_template = """
    You are an expert technical researcher. Analyze the following video transcript and extract the core knowledge.

    Goal: Create a structured summary that a blog writer can use to write a high-quality technical article.

    Transcript:
    {transcript}

    Output Requirements:
    1. **Core Topic**: What is this video mainly about?
    2. **Key Takeaways**: List the 3-5 most important points.
    3. **Technical Details**: Extract code concepts, commands, library names, or specific logic mentioned.
    4. **Structure**: suggest a logical heading structure for a blog post (Introduction, H2s, Conclusion).
    """

writer_template = """
    You are an expert technical blog writer and developer advocate.
    Write a complete, polished blog post based on the following extracted research.

    Research Summary:
    {key_points}

    Video URL: {video_url}

    Requirements:
    1. **Title**: Catchy, SEO-optimized, technical.
    2. **Slug**: URL-friendly version of the title.
    3. **Excerpt**: A compelling 2-sentence hook.
    4. **Content (Markdown)**:
       - Write a full, long-form technical article.
       - **Aesthetics & Formatting (CRITICAL)**:
         - Use **H2** and **H3** headers frequently to break up text.
         - Keep paragraphs short (2-3 sentences max) for better readability ("breathable text").
         - Use **Bold** for key concepts and emphasis.
         - Use *Italics* for subtle emphasis.
         - Use `> Blockquotes` for key takeaways, important notes, or summaries.
         - Use Bullet points and Numbered lists liberally to organize information.
         - Use Tables for comparisons if applicable.
         - Use Code blocks with language specification (e.g., ```python).
       - **IMPORTANT: Image Handling**:
         - DO NOT generate actual images.
         - **Manually insert prompts for where images should be.**
         - Format: `> **Image Prompt:** [Detailed description of what the image should show]`
         - Place these prompts naturally throughout the text (e.g., after an intro, before a complex section).
         - Include one **Cover Image Prompt** at the very beginning of the content body.
    5. **Format**: Return ONLY valid JSON with keys: "title", "slug", "excerpt", "content".
    """

EXTRACTOR_PROMPT = ChatPromptTemplate.from_messages([
    ("human", extractor_template)
])

WRITER_PROMPT = ChatPromptTemplate.from_messages([
    ("human", writer_template)
])

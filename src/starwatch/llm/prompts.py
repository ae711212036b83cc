"""Prompt templates for item commentary and analysis."""

STAR_COMMENTARY_PROMPT = """Analyze this GitHub repository that {subject_name} just starred:

Repo: {full_name}
Description: {description}
Topics: {topics}
Language: {language}
Stars: {stargazers_count}

Write 2-3 sentences of playful satirical commentary on what this star reveals about {organization}'s {role} thinking. Reference {organization} strategy when relevant. Be witty but not mean. Keep it light and fun."""

BLOG_ANALYSIS_PROMPT = """Analyze this blog post by {subject_name}, {organization}'s {role}:

Title: {title}
URL: {url}
Published: {published_at}
Content/Excerpt: {body}

Please provide:
1. A concise 2-3 sentence summary of the key points
2. Witty, satirical analysis (3-4 sentences) connecting this to {organization}'s broader strategy, recent moves, and {short_name}'s leadership style. Be entertaining but insightful.
3. Bold predictions (2-3 sentences) about what this signals for {organization}'s future direction

Format your response as:
SUMMARY: [your summary]
ANALYSIS: [your analysis]
PREDICTIONS: [your predictions]"""

BLOG_SECTION_LABELS = ("SUMMARY", "ANALYSIS", "PREDICTIONS")


__all__ = [
    "STAR_COMMENTARY_PROMPT",
    "BLOG_ANALYSIS_PROMPT",
    "BLOG_SECTION_LABELS",
]

"""
Common prompt components and instructions.

Reusable prompt snippets that can be composed into full prompts.
"""

# ============================================================================
# ROLE
# ============================================================================

ANALYST_ROLE = "You are a YouTube channel trend analysis expert."

SYSTEM_PROMPT_FREE_TEXT = (
    f"{ANALYST_ROLE} You write simple, clear plain-text reports."
)

SYSTEM_PROMPT_STRUCTURED = (
    f"{ANALYST_ROLE} You write data-driven reports and answer with a single JSON object."
)

# ============================================================================
# JSON OUTPUT INSTRUCTIONS
# ============================================================================

JSON_OUTPUT_STRICT = """
**CRITICAL: OUTPUT FORMAT**
- Return ONLY valid JSON, no explanations before or after
- No markdown code blocks (no ```json```)
- Ensure proper JSON escaping for quotes and special characters
- Structure must exactly match the schema provided
"""

PLAIN_TEXT_OUTPUT = """
**OUTPUT FORMAT**
- Write readable plain text, NOT JSON
- Keep it clean, like a well-organized notes page
"""

# ============================================================================
# LANGUAGE
# ============================================================================

LANGUAGE_INSTRUCTION_TEMPLATE = """
**LANGUAGE**
- Write the whole report in {language}
- Keep video titles and proper nouns in their original form
"""

# ============================================================================
# REPORT REQUIREMENTS
# ============================================================================

REPORT_REQUIREMENTS = """
**REQUIREMENTS:**
- Base every statement on the data above
- Be specific: cite titles and view counts
- Include actionable suggestions
"""

# ============================================================================
# REPORT OUTLINES / SCHEMAS
# ============================================================================

FREE_TEXT_REPORT_OUTLINE = """===== YouTube Channel Trend Analysis Report =====

1. Channel Overview
[Overall character of the channel and its content]

2. Key Statistics
- Average views: [number]
- Total views: [number]
- Top performing video: [title]
- Content consistency: [analysis]

3. Title Pattern Analysis
[Frequent title patterns and keywords]

4. Performance Analysis
High performers:
[Success factors of the top videos]

Videos needing improvement:
[How the weakest videos could improve]

5. Trending Keywords
[Popular topics and keywords]

6. Content Strategy Suggestions
[Concrete, actionable strategy suggestions]

7. Conclusion and Recommendations
[Key findings and immediate action items]"""

STRUCTURED_REPORT_SCHEMA = """{
  "channel_overview": {
    "summary": "Overall description of the channel",
    "key_metrics": {
      "avg_views": 0,
      "total_views": 0,
      "top_performing_video": "Title of the best video",
      "content_consistency": "How consistent the content is"
    }
  },
  "title_analysis": {
    "common_patterns": ["Pattern 1", "Pattern 2"],
    "successful_title_formats": ["Format 1", "Format 2"],
    "keyword_usage": ["Keyword 1", "Keyword 2"],
    "title_length_analysis": "Effect of title length",
    "emotional_triggers": ["Trigger 1", "Trigger 2"]
  },
  "performance_analysis": {
    "high_performers": [
      {"title": "Video title", "views": 0, "success_factors": "Why it worked"}
    ],
    "low_performers": [
      {"title": "Video title", "views": 0, "improvement_suggestions": "How to improve"}
    ],
    "performance_insights": "Overall performance insight"
  },
  "content_strategy_report": {
    "trending_topics": ["Topic 1", "Topic 2"],
    "content_gaps": ["Gap 1", "Gap 2"],
    "optimization_recommendations": ["Recommendation 1", "Recommendation 2"],
    "future_content_ideas": ["Idea 1", "Idea 2"]
  },
  "executive_summary": {
    "key_findings": ["Finding 1", "Finding 2"],
    "immediate_actions": ["Action 1", "Action 2"],
    "long_term_strategies": ["Strategy 1", "Strategy 2"],
    "expected_outcomes": ["Outcome 1", "Outcome 2"]
  }
}"""

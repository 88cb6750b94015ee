SCRIPT_SYSTEM_PROMPT = (
    "You are an expert at creating empathetic, relationship-focused collection messages that build "
    "rapport and offer collaboration rather than pressure. Always position collection as a partnership "
    "opportunity and focus on solutions, respect, and mutual benefit."
)

SCRIPT_GENERATION_PROMPT = """Create a highly personalized 30-45 second video message for payment collection outreach that feels supportive and relationship-focused.

COMPANY CONTEXT:
{company_info}

LEAD PROFILE:
- Name: {name}
- Current Role: {current_role} at {current_company}
- Headline: {headline}
- Summary: {summary}
- Key Skills: {skills}
- Education: {education}
- Experience Level: {experience_level} different roles
- Network: {connection_count} connections
- Languages: {languages}

PERSONALIZATION OPPORTUNITIES:
{personalization_points}

COLLECTION MESSAGE REQUIREMENTS:
1. Write ONLY the spoken words - no stage directions, formatting, or labels
2. Open with their name and acknowledge their professional achievements
3. Position the collection as a partnership opportunity to resolve together
4. Reference their success/expertise to build rapport before discussing the matter
5. Use language like "work together," "find a solution," "partnership," "support"
6. Mention flexible payment options or willingness to discuss arrangements
7. Keep it respectful, empathetic, and solutions-focused (never threatening)
8. End with a collaborative call-to-action like "let's chat" or "work together"
9. 30-45 seconds when spoken (approximately 75-115 words)
10. No [PAUSE], [START], [END] or other formatting - just natural speech

Make it feel like you genuinely respect them and want to help find a mutually beneficial solution. Focus on partnership, not pressure."""

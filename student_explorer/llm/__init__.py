"""
Description enhancement layer.

Responsibilities:
- Manage Groq API configuration and credentials.
- Ask the Groq LLM to rewrite a location description for students.
- Fall back to a local decorated description when no key is configured
  or the remote call fails.
"""

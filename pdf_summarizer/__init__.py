"""
PDF Summarizer Application

Accepts an uploaded PDF over HTTP, extracts its text in memory and asks
Google Gemini for a bullet-point summary and a multiple-choice quiz.

Features:
- In-memory PDF processing (no file storage)
- Google Gemini AI integration
- Selectable summary length (brief, normal, detailed)
- Quiz generation from the summary
- Structured logging
"""

__version__ = "1.0.0"
__author__ = "PDF Summarizer Team"
__description__ = "Summarize PDF documents and generate quizzes with Gemini"

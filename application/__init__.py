"""
Application Layer for the Exercise Tracker API.

This package contains:
- ports/: Abstract repository interfaces (what the application needs)
- use_cases/: Request handlers composing validation, queries and persistence
- validation.py: Input validation and date rendering helpers
- queries.py: Filter conditions and result shape for log reads
- exceptions.py: Error taxonomy mapped to HTTP responses
"""

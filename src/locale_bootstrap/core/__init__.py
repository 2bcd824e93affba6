"""
Core Package.

Contains the locale registration pass:
- Bootstrap call matcher
- Locale enumeration and resolution
- Insertion edit builder and applier
- Engine driving the pass over source strings
"""

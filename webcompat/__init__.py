"""Modern web view surface over a legacy engine resolved at run time"""

__version__ = "0.1.0"

"""Service Layer: decodes raw requests and composes core functions per request; owns request logging."""

"""
Malaine pattern definition core.

Pure calculations behind the pattern definition workflow (stitch repeat
fitting, section readiness, default parameters) plus the session object that
owns one definition while it is being edited.
"""

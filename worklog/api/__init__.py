# worklog/api/__init__.py

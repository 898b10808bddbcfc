# util/__init__.py

# intake_wizard/api/__init__.py

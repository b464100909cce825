# intake_wizard/__init__.py

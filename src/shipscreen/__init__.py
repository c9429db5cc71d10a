"\"\"\"Application intake validation and GitHub profile scoring.\"\"\""

__version__ = "0.1.0"

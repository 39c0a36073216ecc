# Importing the source modules registers them
from . import csv_file, google_sheets  # noqa: F401

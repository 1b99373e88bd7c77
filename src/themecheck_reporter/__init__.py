"""Run Shopify Theme Check and turn its offenses into a pull request comment."""

__version__ = "1.0.0"

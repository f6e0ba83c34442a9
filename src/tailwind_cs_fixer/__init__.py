"""
Tailwind CS Fixer - sorts Tailwind CSS classes in HTML and Twig templates
"""

__version__ = "1.0.0"
__author__ = "Tailwind CS Fixer contributors"

# -*- coding: utf-8 -*-
"""

Configuration for the Sphinx documentation generator.

Reference: https://www.sphinx-doc.org/en/master/usage/configuration.html

"""

import os
import sys

sys.path.insert(0, os.path.abspath('..'))
os.environ['DJANGO_SETTINGS_MODULE'] = 'tests.settings'

import django  # noqa: E402

django.setup()

extensions = ['sphinx.ext.autodoc', 'sphinx.ext.coverage',
              'sphinx.ext.todo']
templates_path = ['_templates']
source_suffix = '.rst'
master_doc = 'index'
project = 'django-treewidget'
copyright = '2026, django-treewidget contributors'
version = '1.0'
release = '1.0.0'
exclude_patterns = ['_build']
pygments_style = 'sphinx'
html_theme = 'default'
html_static_path = ['_static']
htmlhelp_basename = 'django-treewidgetdoc'

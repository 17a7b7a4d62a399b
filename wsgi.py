# wsgi.py

import os

from macim import create_app
from config import DevelopmentConfig, ProductionConfig

# Flask command-line tools and WSGI servers pick up this 'app' instance.
app = create_app(ProductionConfig if os.environ.get('MACIM_ENV') == 'production' else DevelopmentConfig)

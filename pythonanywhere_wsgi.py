import sys
import os

# Add your project directory to the sys.path
project_home = os.environ.get('PROJECT_HOME', '/home/YOUR_USERNAME/cf-web-analytics')
if project_home not in sys.path:
    sys.path.insert(0, project_home)

# Set the working directory
os.chdir(project_home)

os.environ.setdefault('FLASK_ENV', 'production')

# Build the Flask app
from app import create_app
application = create_app()

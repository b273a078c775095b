from dotenv import load_dotenv
import os

# Load environment variables from .env file before the config is read
load_dotenv()

from dnssec_admin.app import create_app

# Application object for Gunicorn
app = create_app()

if __name__ == '__main__':
    port = int(os.environ.get('PORT', 5000))
    app.run(host='0.0.0.0', port=port, debug=app.config.get('DEBUG', False))

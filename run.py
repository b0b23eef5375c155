import logging

from dotenv import load_dotenv

from ctc_server import create_app
from ctc_server.config import Settings

load_dotenv()
settings = Settings.from_env()

# Create the Flask app using the factory function
app = create_app(settings)

if __name__ == "__main__":
    logging.getLogger(__name__).info("Server is running on http://localhost:%s", settings.port)
    app.run(host="0.0.0.0", port=settings.port, debug=settings.debug)

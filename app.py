"""Sportsbook Assistant — Entry Point.

Contextual help articles and free-form questions for the sportsbook
frontend.  Binds to 127.0.0.1 unless ASSISTANT_HOST says otherwise.

Run:
    python app.py
"""

import config
from assistant import create_app

application = create_app()

if __name__ == "__main__":
    application.run(
        host=config.HOST,
        port=config.PORT,
        debug=False,
    )

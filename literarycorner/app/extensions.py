from flask_cors import CORS

# Initialized in app factory
cors = CORS()

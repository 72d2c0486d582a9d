"""
Folio Starter App
=================

A ready-to-run portfolio backend with every folio module enabled.

Run with:
    python app.py

Visit:
    http://localhost:5000/api/projects       - Public projects (samples until you add some)
    http://localhost:5000/admin/create-admin - Create the first admin
    http://localhost:5000/admin              - Admin dashboard
"""

from flask import Flask
from folio import Folio, Config

# Create Flask app
app = Flask(__name__)

# Initialize Folio - this registers all modules automatically
folio = Folio(app)


# =============================================================================
# Run the app
# =============================================================================

if __name__ == '__main__':
    print("\n" + "=" * 60)
    print("Folio Starter App")
    print("=" * 60)
    print(f"Public API:      http://localhost:{Config.port}/api/projects")
    print(f"Admin Panel:     http://localhost:{Config.port}/admin")
    print(f"Create Admin:    http://localhost:{Config.port}/admin/create-admin")
    print("=" * 60 + "\n")

    app.run(host='0.0.0.0', port=Config.port, debug=True)


from device_inventory import create_app, init_database
import os

app = create_app()

# Create the database and tables (and seed, if enabled) before serving
init_database(app)

if __name__ == '__main__':
    app.run(host='0.0.0.0', port=int(os.getenv('PORT', 5000)))

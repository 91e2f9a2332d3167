from roster import create_app
import os

app = create_app(os.getenv('FLASK_CONFIG') or 'default')

if __name__ == '__main__':
    # Bind to localhost and skip the reloader when started with `python run.py`
    app.run(host='127.0.0.1', port=5001, debug=app.config.get('DEBUG', False),
            use_reloader=False)

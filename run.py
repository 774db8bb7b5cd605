import os

from shortlinks import create_app

app = create_app()

if __name__ == '__main__':
    # Reloader would start a second sweeper in the child process
    app.run(
        host=os.getenv('HOST', '0.0.0.0'),
        port=int(os.getenv('PORT', 3001)),
        use_reloader=False,
    )

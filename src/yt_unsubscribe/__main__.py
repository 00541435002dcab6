from yt_unsubscribe.cli import run

run()

from respect.cli import app

app(prog_name="respect")

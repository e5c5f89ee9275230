from sova.cli import app

app(prog_name="sova")

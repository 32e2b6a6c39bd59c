from tilesolver.main import app

app(prog_name="tilesolver")

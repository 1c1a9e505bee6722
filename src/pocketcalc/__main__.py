from pocketcalc.cli import app

app(prog_name="pocketcalc")

from diceroll.cli import app

app(prog_name="diceroll")

from travel_expense.cli.app import app

if __name__ == "__main__":
    app(prog_name="travel-expense")  # pragma: no cover

# Import main lazily to avoid loading the Stripe SDK on package import
def __getattr__(name):
    if name == "main":
        from stripeledger.cli.main import main
        return main
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")

import logging
from decimal import Decimal

from patchstruct import LocalBaseStore, StructError, StructType, attribute, coercer


@coercer(Decimal)
def to_decimal(raw: object) -> Decimal:
    return raw if isinstance(raw, Decimal) else Decimal(str(raw))


# Pretend real world: what a bank API would report
BALANCES = {("acme", "42"): "1250.00"}


def fetch_balance(base) -> str:
    """Loader: runs once per base struct, on first read."""
    print(f"  (fetching balance for {base.number})")
    return BALANCES[(base.bank, base.number)]


store = LocalBaseStore()

Account = StructType(
    "Account",
    attribute("bank", str, identity=True),
    attribute("number", str, identity=True),
    attribute("currency", str, identity=True, default="EUR"),
    attribute("balance", Decimal, default=0, loader=fetch_balance),
    attribute("label", default_factory=lambda struct, attr: f"{struct.bank}/{struct.number}"),
    base_provider=store,
)


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG, format="%(name)s %(levelname)s %(message)s")

    # What exists right now
    store.save(Account("acme", "42"))

    # A partial update: only the label changes
    desired = Account("acme", "42")
    desired.label = "rainy day fund"

    print("balance:", desired.balance)  # loaded, not reset to 0
    print("balance:", desired.balance)  # kept on the base
    print("label:", desired.label)
    print("explicit:", desired.explicit_snapshot())

    desired.lock()
    try:
        desired.balance = 0
    except StructError as e:
        print(f"{type(e).__name__}: {e}")

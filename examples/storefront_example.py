"""
Storefront — browse the catalog, quote a coupon, pay through the sheet.

Level 4: paysheet.checkout
Level 3: paysheet.pricing, paysheet.gateway
Level 2: kungfu.Result
"""

from kungfu import Ok, Error
from paysheet import catalog as CT
from paysheet import checkout as CO
from paysheet import gateway as G
from paysheet.config import CheckoutConfig
from examples._infra import banner, report, run, show


async def main() -> None:
    config = CheckoutConfig.demo()
    store = CT.CatalogStore.default()

    banner("Catalog")
    for i, item in enumerate(store):
        print(f"  [{i}] {item.name:<32} {item.price:>8}")

    item = store[0]
    checkout = CO.Checkout(
        G.ScriptedGateway([
            G.EnterCoupon("wrong"),
            G.EnterCoupon("festival"),
            G.Authorize(G.AuthorizedPayment(
                G.PaymentToken("txn-0001", b"opaque", G.PaymentNetwork.VISA),
                G.ShippingContact("Asha", "IN"),
            )),
        ]),
        config,
    )

    banner(f"Quote: {item.name}")
    match checkout.quote(item, "FESTIVAL"):
        case Ok(items):
            show(items)
        case Error(e):
            print(f"  ✗ {e.message}")

    banner("Checkout")
    availability = checkout.availability()
    print(f"  supported={availability.supported} needs_setup={availability.needs_setup}")

    match await checkout.start(item, report):
        case Ok(token):
            print(f"\n✓ Paid: {token.transaction_id}")
        case Error(e):
            print(f"\n✗ Failed: {e.kind.name} {e.message}")


if __name__ == "__main__":
    run(main)

"""
Country mismatch — the sheet rejects a shipping address abroad.

Level 4: paysheet.checkout
Level 3: paysheet.gateway
"""

from kungfu import Ok, Error
from paysheet import catalog as CT
from paysheet import checkout as CO
from paysheet import gateway as G
from paysheet.config import CheckoutConfig
from examples._infra import banner, report, run


async def main() -> None:
    banner("Checkout: Ship to US from an India store")

    gateway = G.ScriptedGateway([
        G.Authorize(G.AuthorizedPayment(
            G.PaymentToken("txn-0002"),
            G.ShippingContact("Sam", "US"),
        )),
    ])
    checkout = CO.Checkout(gateway, CheckoutConfig.demo())

    match await checkout.start(CT.CatalogStore.default()[2], report):
        case Ok(token):
            print(f"\n✓ Paid: {token.transaction_id}")
        case Error(e):
            print(f"\n✗ {e.kind.name}")
            for detail in e.details:
                print(f"  sheet shows: {detail}")

    for reply in gateway.replies_to(G.PaymentAuthorized):
        print(f"  reply: {reply}")


if __name__ == "__main__":
    run(main)

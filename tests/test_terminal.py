import pytest

from cli import terminal
from cli.terminal import format_block, format_message, run
from rendering.blocks import TextBlock
from rendering.message_log import ChatMessage, Sender
from rendering.strategies import render_cart_list, render_order_list, render_product_detail, render_product_list
from widget.shell import ChatWidget


def test_format_text_message():
    entry = ChatMessage(Sender.BOT, TextBlock("Hello!\nHow can I help?"))
    assert format_message(entry) == "Bot: Hello!\n     How can I help?"


def test_format_product_list():
    block = render_product_list({
        "results": [
            {"name": "Shirt", "price": 24, "stock": 7, "productNumber": "SW1", "options": [{"group": "Size", "option": "M"}]},
            {"name": "Mug", "price": 9.5, "stock": 0, "url": "http://shop.test/mug"},
        ],
        "pagination": {"total": 10, "hasNextPage": True},
    })

    assert format_block(block) == [
        "- Shirt (SW1)  €24.00",
        "    M",
        "    7 in stock",
        "- Mug  €9.50",
        "    Out of Stock",
        "    http://shop.test/mug",
        "Showing 2 of 10 products",
    ]


def test_format_product_detail():
    block = render_product_detail({"name": "Mug", "price": 9.5, "stock": 2, "url": "http://shop.test/mug"})
    assert format_block(block) == ["Mug", "€9.50", "2 in stock", "View full details → http://shop.test/mug"]


def test_format_orders_and_cart():
    orders = render_order_list({"results": [{"orderNumber": "1001", "status": "Done", "total": 10, "items": 1}]})
    cart = render_cart_list({"total": 49.98, "results": [{"name": "Mug", "price": 19.99, "unitPrice": 19.99, "quantity": 1}]})

    assert format_block(orders) == ["- Order #1001 [Done]", "    Total: €10.00 | 1 item(s)"]
    assert format_block(cart) == ["Cart Total: €49.98", "- Qty: 1 Mug  Total: €19.99  @ €19.99 / each"]


@pytest.mark.asyncio
async def test_run_loop(config, http_client, storefront, monkeypatch, capsys):
    inputs = iter(["hello", "exit"])
    monkeypatch.setattr(terminal, "input", lambda prompt: next(inputs), raising=False)

    await run(ChatWidget(config, http_client=http_client))

    out = capsys.readouterr().out
    assert "Bot: Hello!" in out
    assert storefront.state.calls == ["context", "context", "context", "chat"]


@pytest.mark.asyncio
async def test_run_does_nothing_when_disabled(config, http_client, storefront, monkeypatch):
    monkeypatch.setattr(terminal, "input", lambda prompt: pytest.fail("should not prompt"), raising=False)

    await run(ChatWidget(config.model_copy(update={"enabled": False}), http_client=http_client))

    assert storefront.state.calls == []

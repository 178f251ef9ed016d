"""Minimal terminal adapter: draws message log entries as text and reads input from stdin."""
import asyncio
import logging

from rendering.blocks import (
    Block,
    CartBlock,
    OrderListBlock,
    ProductDetailBlock,
    ProductListBlock,
    TextBlock,
)
from rendering.message_log import ChatMessage, Sender
from widget.shell import ChatWidget

logger = logging.getLogger(__name__)

EXIT_COMMANDS = {"exit", "quit"}


def format_block(block: Block) -> list[str]:
    if isinstance(block, TextBlock):
        return block.lines

    if isinstance(block, ProductListBlock):
        lines = []
        for card in block.cards:
            head = f"- {card.name} ({card.product_number})" if card.product_number else f"- {card.name}"
            lines.append(f"{head}  {card.price}")
            if card.options:
                lines.append(f"    {', '.join(card.options)}")
            if card.stock_label:
                lines.append(f"    {card.stock_label}")
            elif card.out_of_stock:
                lines.append("    Out of Stock")
            if card.url != "#":
                lines.append(f"    {card.url}")
        if block.pagination:
            lines.append(block.pagination)
        return lines

    if isinstance(block, ProductDetailBlock):
        lines = [block.name]
        if block.product_number:
            lines.append(block.product_number)
        lines.append(block.price)
        if block.stock_label:
            lines.append(block.stock_label)
        lines.extend(str(option) for option in block.options)
        if block.url != "#":
            lines.append(f"{block.call_to_action} {block.url}")
        return lines

    if isinstance(block, OrderListBlock):
        lines = []
        for order in block.orders:
            lines.append(f"- {order.label} [{order.status}]")
            details = [detail for detail in (order.date, order.total, order.items) if detail]
            if details:
                lines.append(f"    {' | '.join(details)}")
        return lines

    if isinstance(block, CartBlock):
        lines = [block.header]
        for line in block.lines:
            entry = f"- {line.quantity_label} {line.name}  Total: {line.total}"
            if line.unit_price_label:
                entry += f"  {line.unit_price_label}"
            lines.append(entry)
        return lines

    logger.warning(f"No terminal layout for {type(block).__name__}")
    return []


def format_message(entry: ChatMessage) -> str:
    prefix = "You" if entry.sender == Sender.USER else "Bot"
    lines = format_block(entry.body)
    if not lines:
        return f"{prefix}:"
    return "\n".join([f"{prefix}: {lines[0]}", *(f"     {line}" for line in lines[1:])])


async def run(widget: ChatWidget):
    """Drive a widget from the terminal until the shopper types exit."""

    def show(entry: ChatMessage):
        if entry.sender == Sender.BOT:
            print(format_message(entry) + "\n")

    try:
        if not await widget.activate():
            return

        widget.log.subscribe(show)
        await widget.toggle()

        print("\n🛒 Shop assistant")
        print("Type 'exit' to quit.\n")
        while True:
            text = await asyncio.to_thread(input, "You: ")
            if text.strip().lower() in EXIT_COMMANDS:
                break
            await widget.submit(text)
    finally:
        await widget.close()

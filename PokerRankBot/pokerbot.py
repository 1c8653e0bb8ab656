import logging
import os

import discord
from discord.ext import commands

from cards import format_hand
from console import log_level
from hand_evaluator import classify
from hand_parser import ParseError, parse

log = logging.getLogger(__name__)

PREFIX = os.getenv("POKER_COMMAND_PREFIX", "!poker ")
CYAN = discord.Colour(0x00FFFF)

intents = discord.Intents.default()
intents.message_content = True
bot = commands.Bot(command_prefix=PREFIX, intents=intents)
bot.remove_command("help")


def rank_embed(hand):
    """Classify a parsed hand and build the result embed."""
    shown = format_hand(hand)
    label = classify(hand)
    return discord.Embed(title=f"Poker Rank: {label}", description=shown, colour=CYAN)


# ===== Commands =====
@bot.command(name="rank")
async def rank(ctx, *, cards: str = ""):
    try:
        hand = parse(cards)
    except ParseError as e:
        return await ctx.reply(str(e))
    embed = rank_embed(hand)
    log.info("%s ranked %s: %s", ctx.author, embed.description, embed.title)
    await ctx.send(embed=embed)


@bot.command(name="help")
async def help_cmd(ctx):
    help_text = (
        "**📖 Poker Rank Commands**\n"
        f"`{PREFIX}rank <c1>, <c2>, <c3>, <c4>, <c5>` – Name a five card hand\n\n"
        "Cards are rank + suit: ranks `2-9 T J Q K A` (`1` also means Ace, `10` means Ten), "
        "suits `D S C H`. Example: `AH, KH, QH, JH, TH`."
    )
    await ctx.send(help_text)


@bot.event
async def on_ready():
    log.info("Poker rank bot online as %s.", bot.user)


# ===== Run =====
def main():
    token = os.getenv("DISCORD_BOT_TOKEN")
    if not token:
        raise SystemExit("Set DISCORD_BOT_TOKEN env var before running.")
    bot.run(token, log_level=log_level())


if __name__ == "__main__":
    main()

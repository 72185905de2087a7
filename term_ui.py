from dataclasses import dataclass, field

from rich.console import Console, Group
from rich.live import Live
from rich.panel import Panel
from rich.table import Table

from chatwo import ChatwoSettings, run_online_buffer
from chatwo.interface import TokenSource


@dataclass
class MessageView:
    """One message as it would land in the chat channel."""

    index: int
    text: str
    notice: bool = False

    def border_style(self, max_length: int) -> str:
        if self.notice:
            return "magenta"
        if len(self.text) > max_length:
            return "red"
        return "green"


@dataclass
class ChannelView:
    """Collects delivered messages and renders them as a fake chat channel."""

    question: str
    max_length: int
    thinking_notice: str = ""
    messages: list[MessageView] = field(default_factory=list)
    error_message: str = ""

    def deliver(self, text: str) -> None:
        view = MessageView(
            index=len(self.messages),
            text=text,
            notice=bool(self.thinking_notice) and text == self.thinking_notice,
        )
        self.messages.append(view)

    def render(self) -> Group:
        panels: list[object] = [
            Panel(
                self.question or "[dim]no question provided[/dim]",
                title="Question",
                border_style="cyan",
            )
        ]
        if not self.messages:
            panels.append(
                Panel("[dim]waiting for the model[/dim]", border_style="blue")
            )
        for view in self.messages:
            panels.append(
                Panel(
                    view.text,
                    title=f"Message {view.index + 1} · {len(view.text)} chars",
                    border_style=view.border_style(self.max_length),
                )
            )

        summary = Table(show_header=True, header_style="bold yellow")
        summary.add_column("Messages")
        summary.add_column("Longest")
        summary.add_column("Ceiling")
        longest = max((len(v.text) for v in self.messages), default=0)
        summary.add_row(str(len(self.messages)), str(longest), str(self.max_length))
        panels.append(summary)

        if self.error_message:
            panels.append(
                Panel(self.error_message, title="Failure", border_style="red")
            )
        return Group(*panels)


async def stream_with_terminal_ui(
    tokens: TokenSource,
    question: str,
    settings: ChatwoSettings,
) -> ChannelView:
    """Stream tokens through the online buffer into a Rich-rendered channel."""
    active_console = Console()
    view = ChannelView(
        question=question,
        max_length=settings.reply_max_chars,
        thinking_notice=settings.thinking_notice,
    )
    active_console.rule("[bold cyan]chatwo terminal channel[/bold cyan]")
    with Live(
        view.render(),
        console=active_console,
        refresh_per_second=8,
        transient=False,
        auto_refresh=False,
    ) as live:

        def sink(text: str) -> None:
            view.deliver(text)
            live.update(view.render(), refresh=True)

        try:
            await run_online_buffer(
                tokens, settings.reply_max_chars, sink, settings=settings
            )
        except Exception as exc:
            view.error_message = str(exc)
            live.update(view.render(), refresh=True)
            raise
    return view


def show_chunks(chunks: list[str], *, title: str, max_length: int) -> None:
    """Print pre-split chunks as channel messages."""
    view = ChannelView(question=title, max_length=max_length)
    for chunk in chunks:
        view.deliver(chunk)
    Console().print(view.render())

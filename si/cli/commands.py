"""si 命令行入口。

用法：
    si "how do I list open ports"
    git diff | si "write a commit message"
    cat error.log | si

流程：
1. 读取管道输入（stdin 非终端时）
2. 无问题且无管道输入 → 打印帮助
3. 加载并校验配置
4. 组装问题（问题 + 管道内容作为 Context）
5. 流式或一次性输出回答
"""

import asyncio
from pathlib import Path

import click
from loguru import logger

from si import __version__
from si.config.loader import EXAMPLE_CONFIG, load_config
from si.config.schema import ConfigError, ConfigNotFoundError
from si.providers.base import LLMProvider
from si.providers.errors import LLMError
from si.providers.factory import create_provider
from si.utils.helpers import configure_logging, read_piped_stdin


def build_question(parts: tuple[str, ...] | list[str], stdin_content: str = "") -> str:
    """组装最终问题。

    - 只有管道输入：管道内容即问题
    - 两者都有：问题在前，管道内容以 "Context:" 段追加

    Args:
        parts: 命令行上的问题片段（以空格连接）
        stdin_content: 管道输入内容

    Returns:
        发送给 LLM 的问题文本
    """
    question = " ".join(parts)
    if not stdin_content:
        return question
    if not question:
        return stdin_content
    return f"{question}\n\nContext:\n{stdin_content}"


async def answer_question(provider: LLMProvider, question: str, stream: bool = True) -> None:
    """向提供商提问并输出回答。

    Args:
        provider: LLM 提供商
        question: 问题文本
        stream: True 时边接收边输出；False 时等完整回答后一次输出
    """
    if not stream:
        answer = await provider.ask(question)
        click.echo(answer)
        return

    await provider.ask_stream(question, lambda chunk: click.echo(chunk, nl=False))
    # 回答结束后补一个换行
    click.echo()


@click.command(name="si", context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("question", nargs=-1)
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    envvar="SI_CONFIG",
    help="Path to config file (default: ~/.config/si.yaml)",
)
@click.option("--debug", is_flag=True, envvar="SI_DEBUG", help="Enable debug mode")
@click.option("--no-stream", is_flag=True, envvar="SI_NO_STREAM", help="Disable streaming responses")
@click.version_option(
    __version__,
    "--version",
    prog_name="si",
    message="%(prog)s version %(version)s",
    help="Show version information",
)
@click.pass_context
def main(ctx: click.Context, question: tuple[str, ...], config_path: Path | None, debug: bool, no_stream: bool) -> None:
    """A command line tool to interact with LLMs.

    QUESTION is the question to ask the LLM. Piped input is appended as context.
    """
    configure_logging(debug)

    stdin_content = read_piped_stdin()
    if not question and not stdin_content:
        click.echo(ctx.get_help())
        return

    try:
        config = load_config(config_path)
    except ConfigNotFoundError as e:
        click.echo(f"Configuration file not found: {e.path}", err=True)
        click.echo("Please create a configuration file at ~/.config/si.yaml", err=True)
        click.echo("Example configuration:", err=True)
        click.echo("```yaml", err=True)
        click.echo(EXAMPLE_CONFIG, nl=False, err=True)
        click.echo("```", err=True)
        ctx.exit(1)
    except ConfigError as e:
        click.echo(f"Error loading configuration: {e}", err=True)
        ctx.exit(1)

    try:
        config.ensure_valid()
    except ConfigError as e:
        click.echo(f"Invalid configuration: {e}", err=True)
        ctx.exit(1)

    provider = create_provider(config)
    text = build_question(question, stdin_content)
    logger.debug(f"Asking question ({len(text)} chars, stream={not no_stream})")

    try:
        asyncio.run(answer_question(provider, text, stream=not no_stream))
    except LLMError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)
    except KeyboardInterrupt:
        click.echo(err=True)
        ctx.exit(130)

"""Pure functions that turn caller input into API request bodies."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from pydantic import ValidationError

from prompt_relay.l1_entities.api_payloads import ChatCompletionRequest, ModerationRequest, ResponseFormat
from prompt_relay.l1_entities.chat_message import ChatMessage
from prompt_relay.l1_entities.chat_model import faster_model
from prompt_relay.l1_entities.completion_options import CompletionOptions
from prompt_relay.l1_entities.conversation_turn import ConversationTurn
from prompt_relay.l1_entities.errors import InvalidInputError


def parse_turns(turns: object) -> list[ConversationTurn]:
    """Validate raw turns into typed ones. Raises InvalidInputError."""
    if isinstance(turns, (str, bytes)) or not isinstance(turns, Sequence):
        raise InvalidInputError('questions must be an array')

    parsed: list[ConversationTurn] = []
    for index, raw in enumerate(turns):
        if isinstance(raw, ConversationTurn):
            parsed.append(raw)
            continue
        if not isinstance(raw, Mapping) or not ('assistant' in raw or 'user' in raw):
            raise InvalidInputError(f"question {index} must be an object with an 'assistant' or 'user' key")
        try:
            parsed.append(ConversationTurn.model_validate(dict(raw)))
        except ValidationError as e:
            raise InvalidInputError(
                f"question {index} must map 'assistant' or 'user' to a string ({e.error_count()} invalid field(s))"
            ) from e
    return parsed


def parse_options(
    options: Mapping | CompletionOptions | None,
    *,
    default_model: str = faster_model,
) -> CompletionOptions:
    """Validate an option mapping. Raises InvalidInputError.

    A missing, None or blank ``model`` resolves to *default_model*, whether
    *options* is a mapping or a CompletionOptions instance.
    """
    if options is None:
        opts = CompletionOptions()
    elif isinstance(options, CompletionOptions):
        opts = options
    elif isinstance(options, Mapping):
        try:
            opts = CompletionOptions.model_validate(dict(options))
        except ValidationError as e:
            bad = ', '.join(str(err['loc'][0]) for err in e.errors() if err['loc'])
            raise InvalidInputError(f'invalid option value(s): {bad}') from e
    else:
        raise InvalidInputError('options must be an object')

    if opts.model is None:
        return opts.model_copy(update={'model': default_model})
    return opts


def build_chat_request(
    system_message: object,
    turns: object,
    options: Mapping | CompletionOptions | None = None,
    *,
    default_model: str = faster_model,
) -> ChatCompletionRequest:
    """Build the chat completion body: system message first, then turns in order.

    Validation order is system message, turns, options; the first failure is
    raised as InvalidInputError.
    """
    if not isinstance(system_message, str):
        raise InvalidInputError('systemMessage must be a string')
    parsed_turns = parse_turns(turns)
    opts = parse_options(options, default_model=default_model)

    messages = [ChatMessage(role='system', content=system_message)]
    for turn in parsed_turns:
        messages.extend(turn.to_messages())

    return ChatCompletionRequest(
        model=opts.model,
        messages=messages,
        max_tokens=opts.max_tokens,
        temperature=opts.temperature,
        top_p=opts.top_p,
        presence_penalty=opts.presence_penalty,
        frequency_penalty=opts.frequency_penalty,
        response_format=ResponseFormat() if opts.json_mode else None,
    )


def build_moderation_request(prompt: object) -> ModerationRequest:
    """Build the moderation body. Raises InvalidInputError for non-string prompts."""
    if not isinstance(prompt, str):
        raise InvalidInputError('prompt must be a string')
    return ModerationRequest(input=prompt)


def encode_request(request: ChatCompletionRequest | ModerationRequest) -> str:
    """Serialize a request body to JSON, keeping ``None`` fields as ``null``."""
    return request.model_dump_json()

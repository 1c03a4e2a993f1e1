"""
Batch Harness — пакетный прогон RSA заданий

Текстовый формат (по умолчанию):
    N                 # количество заданий
    <modulus>         # 4 строки на задание
    <exponent>
    <message>
    <mode>            # 0 = encrypt, 1 = decrypt (одно и то же преобразование)

Вывод на задание:
    Output : <result>
    Time Taken : <ms> ms
    ---------------------

JSON формат (--format json): одна JSON строка на задание по контракту
rsa_job, одна JSON строка результата по контракту rsa_result.

Ошибка отдельного задания (формат, нулевой модуль, флаг режима) не
прерывает пакет: печатается сообщение об ошибке и обработка продолжается.
"""

import argparse
import json
import logging
import sys
import time
from dataclasses import dataclass
from typing import IO, Any, Dict, Final, Iterable, Iterator, List, NamedTuple, Optional, Sequence, Set

from jsonschema import ValidationError

from bigint_rsa.codec.text_codec import decode_text
from bigint_rsa.contracts.validators import RSAJobValidator, RSAResultValidator
from bigint_rsa.core.domain.big_integer import BigInteger
from bigint_rsa.core.errors import BigIntegerError
from bigint_rsa.logging_utils import configure_json_logging
from bigint_rsa.rsa.modpow import encrypt_decrypt

logger = logging.getLogger(__name__)

# =============================================================================
# ПАРАМЕТРЫ
# =============================================================================

SEPARATOR: Final[str] = "-" * 21

LINES_PER_CASE: Final[int] = 4

MODE_ENCRYPT: Final[int] = 0
MODE_DECRYPT: Final[int] = 1

INPUT_FORMATS: Final[tuple[str, ...]] = ("text", "json")


class HarnessInputError(ValueError):
    """Нарушена структура пакета (счётчик заданий, обрыв ввода)."""

    pass


@dataclass(frozen=True)
class HarnessConfig:
    """Конфигурация пакетного прогона.

    - input_format: "text" или "json"
    - decode_text: дополнительно печатать результат как текст (text codec)
    - log_level: уровень JSON логов (stderr)
    """
    input_format: str = "text"
    decode_text: bool = False
    log_level: int = logging.WARNING

    def __post_init__(self) -> None:
        if self.input_format not in INPUT_FORMATS:
            raise ValueError(
                f"input_format must be one of {INPUT_FORMATS}, got {self.input_format!r}"
            )


@dataclass(frozen=True)
class RSACase:
    """Одно задание пакета (сырые строки ввода)."""
    case_id: int
    modulus: str
    exponent: str
    message: str
    mode: str


class CaseOutcome(NamedTuple):
    """Результат выполнения задания."""

    case_id: int
    result: BigInteger
    elapsed_ms: float


class BatchSummary(NamedTuple):
    """Итог пакета."""

    succeeded: int
    failed: int


# =============================================================================
# ВЫПОЛНЕНИЕ ЗАДАНИЯ
# =============================================================================


def parse_mode(raw: str) -> int:
    """
    Разбор флага режима.

    Raises:
        ValueError: Если флаг не 0 и не 1
    """
    try:
        mode = int(raw.strip())
    except ValueError:
        raise ValueError(f"Invalid mode flag: {raw!r}")

    if mode not in (MODE_ENCRYPT, MODE_DECRYPT):
        raise ValueError(f"Invalid mode flag: {raw!r} (expected 0 or 1)")
    return mode


def run_case(case: RSACase) -> CaseOutcome:
    """
    Выполнение одного задания: message^exponent mod modulus.

    Raises:
        InvalidFormat: Некорректная десятичная запись операнда
        DivisionByZero: Нулевой модуль
        ValueError: Некорректный флаг режима или отрицательный показатель
    """
    parse_mode(case.mode)
    message = BigInteger.parse(case.message.strip())
    exponent = BigInteger.parse(case.exponent.strip())
    modulus = BigInteger.parse(case.modulus.strip())

    started = time.perf_counter()
    result = encrypt_decrypt(message, exponent, modulus)
    elapsed_ms = (time.perf_counter() - started) * 1000.0

    logger.info(
        "case completed",
        extra={"case_id": case.case_id, "elapsed_ms": elapsed_ms, "modulus_digits": len(modulus.digits)},
    )
    return CaseOutcome(case_id=case.case_id, result=result, elapsed_ms=elapsed_ms)


# =============================================================================
# ТЕКСТОВЫЙ ФОРМАТ
# =============================================================================


def read_text_cases(lines: Iterable[str]) -> Iterator[RSACase]:
    """
    Чтение заданий текстового формата.

    Raises:
        HarnessInputError: Нет/некорректный счётчик или ввод оборван
    """
    iterator = iter(lines)

    header = next(iterator, None)
    if header is None:
        raise HarnessInputError("Empty input: expected case count on the first line")
    try:
        count = int(header.strip())
    except ValueError:
        raise HarnessInputError(f"Invalid case count: {header.strip()!r}")
    if count < 0:
        raise HarnessInputError(f"Case count cannot be negative: {count}")

    for case_id in range(1, count + 1):
        fields: List[str] = []
        for _ in range(LINES_PER_CASE):
            line = next(iterator, None)
            if line is None:
                raise HarnessInputError(
                    f"Truncated input: case {case_id} expects {LINES_PER_CASE} lines"
                )
            fields.append(line.rstrip("\r\n"))

        modulus, exponent, message, mode = fields
        yield RSACase(case_id=case_id, modulus=modulus, exponent=exponent, message=message, mode=mode)


def run_text_batch(source: IO[str], sink: IO[str], config: HarnessConfig) -> BatchSummary:
    """Прогон пакета текстового формата."""
    succeeded = 0
    failed = 0

    for case in read_text_cases(source):
        text: Optional[str] = None
        try:
            outcome = run_case(case)
            if config.decode_text:
                text = _decode_or_empty(outcome.result)
        except (BigIntegerError, ValueError) as e:
            failed += 1
            logger.warning("case failed", extra={"case_id": case.case_id, "error": str(e)})
            sink.write(f"Test Case {case.case_id}: Error occurred - {e}\n")
            sink.write(SEPARATOR + "\n")
            continue

        succeeded += 1
        sink.write(f"Output : {outcome.result}\n")
        if text is not None:
            sink.write(f"Text : {text}\n")
        sink.write(f"Time Taken : {outcome.elapsed_ms:.4f} ms\n")
        sink.write(SEPARATOR + "\n")

    return BatchSummary(succeeded=succeeded, failed=failed)


def _decode_or_empty(value: BigInteger) -> str:
    if value.negative:
        return ""
    return decode_text(value)


# =============================================================================
# JSON ФОРМАТ
# =============================================================================


def _job_case_id(job: Any, default: int) -> int:
    """case_id задания, если он задан корректно (int >= 1), иначе default."""
    if isinstance(job, dict):
        case_id = job.get("case_id")
        if isinstance(case_id, int) and not isinstance(case_id, bool) and case_id >= 1:
            return case_id
    return default


def run_json_batch(source: IO[str], sink: IO[str], config: HarnessConfig) -> BatchSummary:
    """
    Прогон пакета JSON формата (одно задание на строку).

    Идентификатор задания: явный case_id из задания, иначе порядковый
    номер непустой строки. Повторный идентификатор (явный или по номеру
    строки) - ошибка задания, само задание не выполняется.
    """
    job_validator = RSAJobValidator()
    result_validator = RSAResultValidator()

    succeeded = 0
    failed = 0
    line_no = 0
    seen_ids: Set[int] = set()

    for line in source:
        if not line.strip():
            continue
        line_no += 1
        case_id = line_no

        payload: Dict[str, Any]
        try:
            job = json.loads(line)
            case_id = _job_case_id(job, line_no)
            if case_id in seen_ids:
                raise ValueError(f"Duplicate case_id: {case_id}")
            seen_ids.add(case_id)

            job_validator.validate(job)
            case = RSACase(
                case_id=case_id,
                modulus=job["modulus"],
                exponent=job["exponent"],
                message=job["message"],
                mode=str(job.get("mode", MODE_ENCRYPT)),
            )
            outcome = run_case(case)
            text = _decode_or_empty(outcome.result) if config.decode_text else None
        except ValidationError as e:
            payload = {"case_id": case_id, "status": "error", "error": f"Contract violation: {e.message}"}
        except (json.JSONDecodeError, BigIntegerError, ValueError) as e:
            payload = {"case_id": case_id, "status": "error", "error": str(e) or type(e).__name__}
        else:
            payload = {
                "case_id": outcome.case_id,
                "status": "ok",
                "result": str(outcome.result),
                "elapsed_ms": outcome.elapsed_ms,
            }
            if text is not None:
                payload["text"] = text

        if payload["status"] == "ok":
            succeeded += 1
        else:
            failed += 1
            logger.warning("case failed", extra={"case_id": payload["case_id"], "error": payload["error"]})

        result_validator.validate(payload)
        sink.write(json.dumps(payload, ensure_ascii=False) + "\n")

    return BatchSummary(succeeded=succeeded, failed=failed)


# =============================================================================
# CLI
# =============================================================================


def run_batch(source: IO[str], sink: IO[str], config: Optional[HarnessConfig] = None) -> BatchSummary:
    """Прогон пакета в формате из config."""
    config = config or HarnessConfig()
    if config.input_format == "json":
        return run_json_batch(source, sink, config)
    return run_text_batch(source, sink, config)


def _load_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="bigint-rsa-batch",
        description="Run RSA modular exponentiation jobs over arbitrary-precision decimals.",
    )
    parser.add_argument("input", nargs="?", default="-", help="Input file (default: stdin)")
    parser.add_argument("--format", choices=INPUT_FORMATS, default="text", help="Input format")
    parser.add_argument(
        "--decode-text",
        action="store_true",
        help="Also print each result decoded as UTF-8 text",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="JSON log level (logs go to stderr)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Точка входа CLI.

    Returns:
        0 если все задания выполнены, 1 если были ошибки заданий,
        2 если нарушена структура ввода
    """
    args = _load_args(argv)
    config = HarnessConfig(
        input_format=args.format,
        decode_text=args.decode_text,
        log_level=getattr(logging, args.log_level),
    )
    configure_json_logging(config.log_level)

    try:
        if args.input == "-":
            summary = run_batch(sys.stdin, sys.stdout, config)
        else:
            with open(args.input, "r", encoding="utf-8") as source:
                summary = run_batch(source, sys.stdout, config)
    except HarnessInputError as e:
        logger.error("batch aborted", extra={"error": str(e)})
        print(f"Input error: {e}", file=sys.stderr)
        return 2

    logger.info("batch finished", extra={"succeeded": summary.succeeded, "failed": summary.failed})
    return 1 if summary.failed else 0

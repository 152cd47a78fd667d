import asyncio
import functools
import logging


def create_loop(debug=False):
    # loop should log instead of swallowing exceptions

    def handle_exception(loop, context):
        # context["message"] will always be there; but context["exception"] may not
        msg = context.get("exception", context["message"])
        logging.getLogger(__name__).error("Caught exception: %s", msg)

    ioloop = asyncio.new_event_loop()
    ioloop.set_exception_handler(handle_exception)
    ioloop.set_debug(debug)
    return ioloop


def create_task(
    coroutine,
    *,
    logger,
    message,
    message_args = (),
    loop = None,
    ):
    '''
    This helper function wraps a ``loop.create_task(coroutine())`` call and ensures there is
    an exception handler added to the resulting task. If the task raises an exception it is logged
    using the provided ``logger``, with additional context provided by ``message`` and optionally
    ``message_args``.
    '''
    if loop is None:
        loop = asyncio.get_running_loop()
    task = loop.create_task(coroutine)
    task.add_done_callback(
        functools.partial(_handle_task_result, logger = logger, message = message, message_args = message_args)
    )
    return task


def _handle_task_result(
    task,
    *,
    logger,
    message,
    message_args = (),
):
    if task.cancelled():
        # Task cancellation should not be logged as an error.
        return
    try:
        task.result()
    except Exception:  # pylint: disable=broad-except
        logger.exception(message, *message_args)
        raise

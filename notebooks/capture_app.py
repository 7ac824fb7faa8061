import marimo

__generated_with = "0.13.10"
app = marimo.App(width="medium", app_title="Vault Capture")


# ---------------------------------------------------------------------------
# Bootstrap: config, store, AI client
# ---------------------------------------------------------------------------


@app.cell
def _():
    import marimo as mo

    return (mo,)


@app.cell
def _setup():
    import os
    from pathlib import Path

    from capture.config import load_config
    from capture.errors import CaptureError
    from capture.ollama import HealthStatus, OllamaClient
    from capture.prompts import PromptLibrary
    from capture.store import FALLBACK_STEM, VaultStore

    config = load_config(os.getenv("CAPTURE_CONFIG", Path.home() / ".config" / "capture.toml"))
    store = VaultStore(config.vault_path) if config.vault_path else None
    prompts = PromptLibrary(config.vault_path) if config.vault_path else None
    client = OllamaClient(config.ollama_url, config.ollama_model)
    return CaptureError, FALLBACK_STEM, HealthStatus, client, config, prompts, store


@app.cell
def _status(mo, HealthStatus, client, config, store):
    health = client.health_check()
    messages = {
        HealthStatus.READY: ("success", f"Ollama ready · `{config.ollama_model}`"),
        HealthStatus.SERVER_UNAVAILABLE: ("danger", f"Ollama not reachable at `{config.ollama_url}`"),
        HealthStatus.MODEL_NOT_FOUND: ("warn", f"Model `{config.ollama_model}` is not installed"),
    }
    kind, text = messages[health]
    vault_text = (
        f"Vault: `{store.vault_dir}`" if store is not None and store.is_valid
        else "Vault path is not configured (set `CAPTURE_VAULT_PATH`)."
    )
    mo.vstack([mo.callout(mo.md(text), kind=kind), mo.md(vault_text)])
    return


# ---------------------------------------------------------------------------
# Quick capture
# ---------------------------------------------------------------------------


@app.cell
def _capture_form(mo, config):
    title_input = mo.ui.text(placeholder="Title", label="", full_width=True)
    content_input = mo.ui.text_area(placeholder="Write a memo…", label="", full_width=True, rows=6)
    tag_select = mo.ui.multiselect(options=config.available_tags, label="Tags")
    suggest_btn = mo.ui.run_button(label="Suggest tags", kind="neutral")
    save_btn = mo.ui.run_button(label="Save to Inbox", kind="success")

    mo.vstack(
        [
            mo.md("## Capture"),
            title_input,
            content_input,
            mo.hstack([tag_select, suggest_btn, save_btn], gap="8px", align="center"),
        ]
    )
    return content_input, save_btn, suggest_btn, tag_select, title_input


@app.cell
def _suggest(mo, CaptureError, client, config, content_input, prompts, suggest_btn, title_input):
    from capture.tags import suggest_tags

    mo.stop(not suggest_btn.value or prompts is None)
    try:
        suggested = suggest_tags(
            client, prompts, title_input.value, content_input.value, config.available_tags
        )
        output = (
            mo.md("Suggested: " + "  ".join(f"`#{t}`" for t in suggested))
            if suggested
            else mo.md("_No matching tags suggested._")
        )
    except CaptureError as exc:
        output = mo.callout(mo.md(str(exc)), kind="warn")
    output
    return


@app.cell
def _save(mo, CaptureError, FALLBACK_STEM, content_input, save_btn, store, tag_select, title_input):
    mo.stop(not save_btn.value)
    if store is None:
        result = mo.callout(mo.md("Vault path is not configured."), kind="danger")
    else:
        try:
            path = store.create_note(
                title_input.value or FALLBACK_STEM,
                content_input.value,
                tags=tag_select.value,
            )
            result = mo.callout(mo.md(f"✓ Saved `{store.inbox}/{path.name}`"), kind="success")
        except (CaptureError, OSError) as exc:
            result = mo.callout(mo.md(str(exc)), kind="danger")
    result
    return


# ---------------------------------------------------------------------------
# Daily review
# ---------------------------------------------------------------------------


@app.cell
def _review_state(mo):
    get_review, set_review = mo.state(None)
    return get_review, set_review


@app.cell
def _review_form(mo):
    import datetime

    day_picker = mo.ui.date(value=datetime.date.today().isoformat(), label="Day")
    generate_btn = mo.ui.run_button(label="Generate review", kind="neutral")
    save_review_btn = mo.ui.run_button(label="Save to daily note", kind="success")
    mo.vstack(
        [
            mo.md("## Daily review"),
            mo.hstack([day_picker, generate_btn, save_review_btn], gap="8px", align="center"),
        ]
    )
    return day_picker, generate_btn, save_review_btn


@app.cell
def _memos(mo, day_picker, store):
    memos = store.extract_memos(day_picker.value) if store is not None else []
    mo.md("\n".join(f"- {m}" for m in memos) if memos else "_No memos for this day._")
    return (memos,)


@app.cell
def _generate(mo, CaptureError, client, generate_btn, memos, prompts, set_review):
    from capture.review import generate_review

    mo.stop(not generate_btn.value or not memos or prompts is None)
    try:
        set_review(generate_review(client, prompts, memos))
        generated = mo.md("")
    except CaptureError as exc:
        generated = mo.callout(mo.md(str(exc)), kind="danger")
    generated
    return


@app.cell
def _show_review(mo, get_review):
    review = get_review()
    mo.md(review.to_markdown()) if review is not None else mo.md("")
    return


@app.cell
def _save_review(mo, CaptureError, day_picker, get_review, save_review_btn, store):
    mo.stop(not save_review_btn.value or get_review() is None or store is None)
    try:
        store.update_daily_review(day_picker.value, get_review().to_markdown())
        saved = mo.callout(mo.md("✓ Saved to the daily note"), kind="success")
    except (CaptureError, OSError) as exc:
        saved = mo.callout(mo.md(str(exc)), kind="danger")
    saved
    return


if __name__ == "__main__":
    app.run()

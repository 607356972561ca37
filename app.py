import logging
import os

import gradio as gr

from strapi_stencil.handlers import (
    MODE_FLATTEN,
    MODES,
    export_handler,
    load_response_file,
    load_response_text,
    preview_handler,
)

# --- UI Definition ---
with gr.Blocks(title="Strapi Stencil") as demo:
    gr.Markdown("# Strapi Stencil")
    gr.Markdown("Upload a content API response, flatten its `data`/`attributes` envelopes and consolidate localizations.")

    # State
    response_state = gr.State()

    with gr.Row():
        # Left Panel: Input
        with gr.Column(scale=1):
            gr.Markdown("### 1. Import")
            file_input = gr.File(label="Upload Response JSON", file_types=[".json"])
            text_input = gr.Code(label="...or paste the response body", language="json")
            parse_text_btn = gr.Button("Load Pasted JSON")
            status_msg = gr.Textbox(label="Status", interactive=False)
            entity_count = gr.Textbox(label="Entity Count", interactive=False)

        # Right Panel: Transformation
        with gr.Column(scale=1):
            gr.Markdown("### 2. Transform")
            mode_selector = gr.Radio(choices=MODES, value=MODE_FLATTEN, label="Mode")
            fill_missing = gr.Checkbox(
                label="Fill missing locale fields from primary locale",
                value=False,
            )

            gr.Markdown("### 3. Export")
            output_filename = gr.Textbox(label="Output Filename (optional)", placeholder="flattened")
            preview_btn = gr.Button("Load Preview")
            export_btn = gr.Button("Export Data", variant="primary")
            download_output = gr.File(label="Download Result")
            result_preview = gr.JSON(label="Preview (first 3 entries)")

    file_input.upload(
        fn=load_response_file,
        inputs=[file_input],
        outputs=[response_state, status_msg, entity_count, result_preview],
    )

    parse_text_btn.click(
        fn=load_response_text,
        inputs=[text_input],
        outputs=[response_state, status_msg, entity_count, result_preview],
    )

    preview_btn.click(
        fn=preview_handler,
        inputs=[response_state, mode_selector, fill_missing],
        outputs=[result_preview, status_msg],
    )

    export_btn.click(
        fn=export_handler,
        inputs=[response_state, mode_selector, fill_missing, output_filename],
        outputs=[download_output, status_msg],
    )

if __name__ == "__main__":
    logging.basicConfig(level=os.environ.get("STENCIL_LOG_LEVEL", "INFO").upper())
    demo.launch(
        server_name=os.environ.get("STENCIL_SERVER_NAME", "127.0.0.1"),
        server_port=int(os.environ.get("STENCIL_SERVER_PORT", "7860")),
    )

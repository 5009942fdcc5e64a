from monetary_tools.demo.value_tools_demo import configure_logging, run


if __name__ == "__main__":
    configure_logging()
    run()

from sshmon_check_postgres.main import main

main()

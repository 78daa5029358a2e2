from ec2_inventory.cli import cli

cli(prog_name="ec2-inventory")
